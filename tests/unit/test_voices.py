"""Unit tests for the static voice catalog."""

from elevenlabs_ttd import voices


def test_static_voice_constants_expose_ids_and_metadata() -> None:
    """Module constants should carry id, display name, and gender."""

    assert voices.RACHEL.voice_id == "21m00Tcm4TlvDq8ikWAM"
    assert voices.RACHEL.name == "Rachel"
    assert voices.RACHEL.gender == "female"
    assert voices.ANTONI.id() == "ErXwobaYiN019PkySvjV"


def test_catalog_partitions_into_male_and_female() -> None:
    """Every voice should be in exactly one gender subset."""

    all_voices = voices.all()
    male_voices = voices.male()
    female_voices = voices.female()

    assert male_voices
    assert female_voices
    assert len(all_voices) == len(male_voices) + len(female_voices)
    assert all(voice.gender == "male" for voice in male_voices)
    assert all(voice.gender == "female" for voice in female_voices)


def test_catalog_order_is_stable_and_ids_are_unique() -> None:
    """Listing twice should give the same order; ids should not repeat."""

    first = voices.all()
    second = voices.all()

    assert first == second
    assert len({voice.voice_id for voice in first}) == len(first)


def test_all_returns_a_copy() -> None:
    """Mutating the returned list should not alter the catalog."""

    listed = voices.all()
    listed.clear()

    assert voices.all()


def test_filter_by_gender_is_exact_match() -> None:
    """Gender filtering should not normalize case."""

    assert voices.filter_by_gender("Male") == []
    assert voices.filter_by_gender("male") == voices.male()


def test_find_by_name_is_case_insensitive() -> None:
    """Name lookup should ignore case and return `None` for unknown names."""

    found = voices.find_by_name("Rachel")
    found_lower = voices.find_by_name("rachel")

    assert found is not None
    assert found_lower is not None
    assert found.voice_id == "21m00Tcm4TlvDq8ikWAM"
    assert found_lower.voice_id == found.voice_id
    assert voices.find_by_name("NonExistentVoice") is None


def test_find_by_name_does_not_fuzzy_match() -> None:
    """Partial names should not match."""

    assert voices.find_by_name("Rach") is None
    assert voices.find_by_name(" Rachel ") is None


def test_find_by_id_matches_exactly() -> None:
    """Id lookup should return the catalog record or `None`."""

    assert voices.find_by_id("VR6AewLTigWG4xSOukaG") == voices.ARNOLD
    assert voices.find_by_id("vr6aewltigwg4xsoukag") is None


def test_find_by_name_resolves_ivana() -> None:
    voice = voices.find_by_name("ivana")

    assert voice is voices.IVANA
    assert voice.gender == "female"
    assert voices.IVANA in voices.female()
