import random
import re

import pytest

from quantum_link.domain.services.handles import (
    generate_candidate,
    handle_rules_message,
    normalize_handle_query,
    validate_handle,
)

CANDIDATE = re.compile(r"^[a-z0-9]+-\d{4}$")


class TestGenerateCandidate:
    def test_uses_email_local_part(self):
        candidate = generate_candidate("Alice.Smith+tag@example.com", rng=random.Random(1))
        assert candidate.startswith("alicesmithtag-")
        assert CANDIDATE.match(candidate)

    def test_name_seed_is_stripped_and_lowercased(self):
        candidate = generate_candidate("Orion Vega", rng=random.Random(2))
        assert candidate.startswith("orionvega-")

    @pytest.mark.parametrize("seed", [None, "", "@example.com", "!!!"])
    def test_falls_back_to_user(self, seed):
        candidate = generate_candidate(seed, rng=random.Random(3))
        assert candidate.startswith("user-")
        assert CANDIDATE.match(candidate)

    def test_suffix_is_four_digits(self):
        rng = random.Random(4)
        for _ in range(200):
            suffix = int(generate_candidate("bob", rng=rng).split("-")[1])
            assert 1000 <= suffix <= 9999

    def test_custom_fallback_and_separator(self):
        candidate = generate_candidate(None, rng=random.Random(5), fallback="anon", separator="_")
        assert re.match(r"^anon_\d{4}$", candidate)


class TestValidateHandle:
    @pytest.mark.parametrize("raw", ["orion1234", "ab1234", "  quark2024  ", "1234ab", "a-b_1234"])
    def test_accepts(self, raw):
        result = validate_handle(raw)
        assert result.ok
        assert result.value == raw.strip()

    @pytest.mark.parametrize("raw", ["", "   ", "abcdef", "ab123", "abcdefgh123", "12345"])
    def test_rejects(self, raw):
        result = validate_handle(raw)
        assert not result.ok
        assert result.message == (
            "Your quantum ID must be at least 6 characters and include at least 4 numbers."
        )

    def test_case_is_preserved(self):
        assert validate_handle("Orion1234").value == "Orion1234"

    def test_non_ascii_digits_do_not_count(self):
        assert not validate_handle("abc١٢٣٤").ok

    def test_rules_message_follows_settings(self):
        assert handle_rules_message(8, 2) == (
            "Your quantum ID must be at least 8 characters and include at least 2 numbers."
        )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("@bob-5678", "bob-5678"),
        ("  @bob-5678 ", "bob-5678"),
        ("bob-5678", "bob-5678"),
        ("@@bob", "@bob"),
        ("", ""),
    ],
)
def test_normalize_handle_query(raw, expected):
    assert normalize_handle_query(raw) == expected
