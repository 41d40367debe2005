import json

import pytest

from domaintwist.services import filters
from domaintwist.services.permutation import STRATEGY_ORDER, Candidate, MutationKind, resolve_kinds


@pytest.fixture
def candidates():
    return [
        Candidate("xample.com", "com", MutationKind.OMISSION),
        Candidate("example.net", "net", MutationKind.TLD_VARIATION),
        Candidate("xn--xample-9ua.com", "com", MutationKind.HOMOGLYPH),
    ]


class TestMutationKind:
    def test_wire_spelling_is_stable(self):
        assert [k.value for k in MutationKind][:13] == [
            "Addition", "BitSquatting", "Homoglyph", "Hyphenation", "Insertion", "Omission",
            "Repetition", "Replacement", "Subdomain", "Transposition", "VowelSwap",
            "TldVariation", "Combosquatting",
        ]
        assert json.dumps(MutationKind.VOWEL_SWAP) == '"VowelSwap"'
        assert str(MutationKind.BITSQUATTING) == "BitSquatting"

    @pytest.mark.parametrize("name", ["VowelSwap", "vowelswap", "vowel-swap", "VOWEL_SWAP", MutationKind.VOWEL_SWAP])
    def test_lookup(self, name):
        assert MutationKind.lookup(name) is MutationKind.VOWEL_SWAP

    def test_lookup_unknown(self):
        with pytest.raises(ValueError):
            MutationKind.lookup("teleportation")

    def test_strategy_order_covers_every_kind_once(self):
        assert sorted(STRATEGY_ORDER) == sorted(MutationKind)
        assert len(set(STRATEGY_ORDER)) == len(STRATEGY_ORDER)

    def test_resolve_kinds_uses_canonical_order(self):
        assert resolve_kinds(["Addition", "omission"]) == [MutationKind.OMISSION, MutationKind.ADDITION]
        assert resolve_kinds(None) == STRATEGY_ORDER


class TestCandidate:
    def test_equality_and_hash_use_fqdn_only(self):
        a = Candidate("A.com", "com", MutationKind.OMISSION)
        b = Candidate("a.com", "com", "Insertion")
        assert a == b
        assert not (a != b)
        assert len({a, b}) == 1

    def test_attribute_access(self):
        c = Candidate("xample.com", "com", "omission")
        assert c.fqdn == "xample.com"
        assert c.kind is MutationKind.OMISSION
        with pytest.raises(AttributeError):
            c.registered

    def test_to_dict(self, candidates):
        assert candidates[0].to_dict() == {"fqdn": "xample.com", "tld": "com", "kind": "Omission"}
        assert candidates[2].to_dict(unicode=True)["fqdn"] == "éxample.com"

    def test_sorting(self, candidates):
        assert [c.fqdn for c in sorted(candidates)] == ["example.net", "xample.com", "xn--xample-9ua.com"]


class TestFilters:
    def test_permissive_is_idempotent(self, candidates):
        once = filters.apply(candidates)
        assert once == candidates
        assert filters.apply(once) == once

    def test_exclude_domains(self, candidates):
        accept = filters.exclude_domains("Example.NET.")
        assert [c.fqdn for c in filters.apply(candidates, accept)] == ["xample.com", "xn--xample-9ua.com"]

    def test_max_length(self, candidates):
        assert [c.fqdn for c in filters.apply(candidates, filters.max_length(10))] == ["xample.com"]

    def test_only_kinds(self, candidates):
        accept = filters.only_kinds(["TldVariation"])
        assert [c.fqdn for c in filters.apply(candidates, accept)] == ["example.net"]

    def test_ascii_only(self, candidates):
        assert len(filters.apply(candidates, filters.ascii_only)) == 2

    def test_all_of(self, candidates):
        accept = filters.all_of(filters.ascii_only, filters.max_length(10))
        assert [c.fqdn for c in filters.apply(candidates, accept)] == ["xample.com"]
        assert filters.all_of() is filters.permissive
