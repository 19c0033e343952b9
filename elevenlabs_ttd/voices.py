"""Static catalog of premade ElevenLabs voices.

Responsibilities:
- Expose named voice identifiers with gender metadata as module constants.
- Provide listing, gender filtering, and lookup helpers over the catalog.

Every catalog entry carries exactly one of the genders in `GENDERS`.
"""

from __future__ import annotations

from dataclasses import dataclass

MALE = "male"
FEMALE = "female"
GENDERS = (MALE, FEMALE)


@dataclass(frozen=True, slots=True)
class StaticVoice:
    """One premade voice available to every account.

    Attributes:
        voice_id: Provider-native voice identifier used in API calls.
        name: Human-readable display name.
        gender: Either `male` or `female`.
    """

    voice_id: str
    name: str
    gender: str

    def id(self) -> str:
        """Return the voice identifier for API calls."""

        return self.voice_id


ADAM = StaticVoice("pNInz6obpgDQGcFmaJgB", "Adam", MALE)
ALICE = StaticVoice("Xb7hH8MSUJpSbSDYk0k2", "Alice", FEMALE)
ANTONI = StaticVoice("ErXwobaYiN019PkySvjV", "Antoni", MALE)
ARNOLD = StaticVoice("VR6AewLTigWG4xSOukaG", "Arnold", MALE)
BILL = StaticVoice("pqHfZKP75CvOlQylNhV4", "Bill", MALE)
BRIAN = StaticVoice("nPczCjzI2devNBz1zQrb", "Brian", MALE)
CALLUM = StaticVoice("N2lVS1w4EtoT3dr4eOWO", "Callum", MALE)
CHARLIE = StaticVoice("IKne3meq5aSn9XLyUdCD", "Charlie", MALE)
CHARLOTTE = StaticVoice("XB0fDUnXU5powFXDhCwa", "Charlotte", FEMALE)
CHRIS = StaticVoice("iP95p4xoKVk53GoZ742B", "Chris", MALE)
CLYDE = StaticVoice("2EiwWnXFnvU5JabPnv8n", "Clyde", MALE)
DANIEL = StaticVoice("onwK4e9ZLuTAKqWW03F9", "Daniel", MALE)
DAVE = StaticVoice("CYw3kZ02Hs0563khs1Fj", "Dave", MALE)
DOMI = StaticVoice("AZnzlk1XvdvUeBnXmlld", "Domi", FEMALE)
DOROTHY = StaticVoice("ThT5KcBeYPX3keUQqHPh", "Dorothy", FEMALE)
DREW = StaticVoice("29vD33N1CtxCmqQRPOHJ", "Drew", MALE)
ELLI = StaticVoice("MF3mGyEYCl7XYWbV9V6O", "Elli", FEMALE)
EMILY = StaticVoice("LcfcDJNUP1GQjkzn1xUU", "Emily", FEMALE)
ETHAN = StaticVoice("g5CIjZEefAph4nQFvHAz", "Ethan", MALE)
FIN = StaticVoice("D38z5RcWu1voky8WS1ja", "Fin", MALE)
FREYA = StaticVoice("jsCqWAovK2LkecY7zXl4", "Freya", FEMALE)
GEORGE = StaticVoice("JBFqnCBsd6RMkjVDRZzb", "George", MALE)
GIGI = StaticVoice("jBpfuIE2acCO8z3wKNLl", "Gigi", FEMALE)
GIOVANNI = StaticVoice("zcAOhNBS3c14rBihAFp1", "Giovanni", MALE)
GLINDA = StaticVoice("z9fAnlkpzviPz146aGWa", "Glinda", FEMALE)
GRACE = StaticVoice("oWAxZDx7w5VEj9dCyTzz", "Grace", FEMALE)
HARRY = StaticVoice("SOYHLrjzK2X1ezoPC6cr", "Harry", MALE)
IVANA = StaticVoice("4NejU5DwQjevnR6mh3mb", "Ivana", FEMALE)
JAMES = StaticVoice("ZQe5CZNOzWyzPSCn5a3c", "James", MALE)
JEREMY = StaticVoice("bVMeCyTHy58xNoL34h3p", "Jeremy", MALE)
JESSIE = StaticVoice("t0jbNlBVZ17f02VDIeMI", "Jessie", MALE)
JOSEPH = StaticVoice("Zlb1dXrM653N07WRdFW3", "Joseph", MALE)
JOSH = StaticVoice("TxGEqnHWrfWFTfGW9XjX", "Josh", MALE)
LIAM = StaticVoice("TX3LPaxmHKxFdv7VOQHJ", "Liam", MALE)
LILY = StaticVoice("pFZP5JQG7iQjIQuC4Bku", "Lily", FEMALE)
MATILDA = StaticVoice("XrExE9yKIg1WjnnlVkGX", "Matilda", FEMALE)
MICHAEL = StaticVoice("flq6f7yk4E4fJM5XTYuZ", "Michael", MALE)
MIMI = StaticVoice("zrHiDhphv9ZnVXBqCLjz", "Mimi", FEMALE)
NICOLE = StaticVoice("piTKgcLEGmPE4e6mEKli", "Nicole", FEMALE)
PATRICK = StaticVoice("ODq5zmih8GrVes37Dizd", "Patrick", MALE)
PAUL = StaticVoice("5Q0t7uMcjvnagumLfvZi", "Paul", MALE)
RACHEL = StaticVoice("21m00Tcm4TlvDq8ikWAM", "Rachel", FEMALE)
SAM = StaticVoice("yoZ06aMxZJJ28mfd3POQ", "Sam", MALE)
SARAH = StaticVoice("EXAVITQu4vr4xnSDxMaL", "Sarah", FEMALE)
SERENA = StaticVoice("pMsXgVXv3BLzUgSXRplE", "Serena", FEMALE)
THOMAS = StaticVoice("GBv7mTt0atIp3Br8iCZE", "Thomas", MALE)

_CATALOG: tuple[StaticVoice, ...] = (
    ADAM,
    ALICE,
    ANTONI,
    ARNOLD,
    BILL,
    BRIAN,
    CALLUM,
    CHARLIE,
    CHARLOTTE,
    CHRIS,
    CLYDE,
    DANIEL,
    DAVE,
    DOMI,
    DOROTHY,
    DREW,
    ELLI,
    EMILY,
    ETHAN,
    FIN,
    FREYA,
    GEORGE,
    GIGI,
    GIOVANNI,
    GLINDA,
    GRACE,
    HARRY,
    IVANA,
    JAMES,
    JEREMY,
    JESSIE,
    JOSEPH,
    JOSH,
    LIAM,
    LILY,
    MATILDA,
    MICHAEL,
    MIMI,
    NICOLE,
    PATRICK,
    PAUL,
    RACHEL,
    SAM,
    SARAH,
    SERENA,
    THOMAS,
)


def all() -> list[StaticVoice]:  # noqa: A001
    """Return every catalog voice in stable order."""

    return list(_CATALOG)


def filter_by_gender(gender: str) -> list[StaticVoice]:
    """Return catalog voices whose gender matches exactly."""

    return [voice for voice in _CATALOG if voice.gender == gender]


def male() -> list[StaticVoice]:
    """Return all male catalog voices."""

    return filter_by_gender(MALE)


def female() -> list[StaticVoice]:
    """Return all female catalog voices."""

    return filter_by_gender(FEMALE)


def find_by_name(name: str) -> StaticVoice | None:
    """Return the first voice whose display name matches case-insensitively."""

    wanted = name.lower()
    for voice in _CATALOG:
        if voice.name.lower() == wanted:
            return voice
    return None


def find_by_id(voice_id: str) -> StaticVoice | None:
    """Return the catalog voice with an exact identifier match."""

    for voice in _CATALOG:
        if voice.voice_id == voice_id:
            return voice
    return None
