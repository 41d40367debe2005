import pytest

from domaintwist.services.domain_parser import parse
from domaintwist.services.fuzzer import Fuzzer
from domaintwist.services.permutation import Candidate, MutationKind


@pytest.fixture
def fuzzer():
    return Fuzzer()


@pytest.fixture
def example():
    return parse("example.com")


class TestRootStrategies:
    def test_omission(self, fuzzer):
        assert list(fuzzer._omission("abc")) == ["bc", "ac", "ab"]

    def test_omission_needs_two_characters(self, fuzzer):
        assert list(fuzzer._omission("a")) == []

    def test_transposition(self, fuzzer):
        assert list(fuzzer._transposition("abcd")) == ["bacd", "acbd", "abdc"]

    def test_transposition_skips_identical_pairs(self, fuzzer):
        assert list(fuzzer._transposition("aab")) == ["aba"]
        assert list(fuzzer._transposition("a")) == []

    def test_repetition(self, fuzzer):
        assert list(fuzzer._repetition("ab")) == ["aab", "abb"]

    def test_vowel_swap(self, fuzzer):
        assert list(fuzzer._vowel_swap("ba")) == ["be", "bi", "bo", "bu"]
        assert list(fuzzer._vowel_swap("xyz")) == []

    def test_hyphenation(self, fuzzer):
        assert list(fuzzer._hyphenation("abc")) == ["a-bc", "ab-c"]
        assert list(fuzzer._hyphenation("a-b")) == []

    def test_subdomain(self, fuzzer):
        assert list(fuzzer._subdomain("abc")) == ["a.bc", "ab.c"]
        assert list(fuzzer._subdomain("a")) == []

    def test_addition(self, fuzzer):
        results = list(fuzzer._addition("ab"))
        assert len(results) == 36
        assert "abz" in results
        assert "ab0" in results

    def test_insertion(self, fuzzer):
        results = list(fuzzer._insertion("ab"))
        assert len(results) == 36
        assert all(r[0] == "a" and r[2] == "b" for r in results)
        assert list(fuzzer._insertion("a")) == []

    def test_bitsquatting(self, fuzzer):
        # 0x61 flipped: 0x63 'c', 0x65 'e', 0x69 'i', 0x71 'q'; the rest are not hostname characters
        assert list(fuzzer._bitsquatting("a")) == ["c", "e", "i", "q"]

    def test_bitsquatting_skips_non_ascii(self, fuzzer):
        assert list(fuzzer._bitsquatting("bücher")) == []

    def test_replacement_uses_all_layouts(self, fuzzer):
        assert set(fuzzer._replacement("a")) == {"q", "w", "s", "z", "y", "2", "1"}

    def test_replacement_with_single_layout(self):
        fuzzer = Fuzzer(keyboards=[{"a": "qs"}])
        assert list(fuzzer._replacement("ab")) == ["qb", "sb"]

    def test_mapped(self, fuzzer):
        results = list(fuzzer._mapped("modem"))
        assert "rnodem" in results
        assert "nnodem" in results
        assert "moclem" in results
        assert "modern" in results

    def test_cyrillic(self, fuzzer):
        assert list(fuzzer._cyrillic("ab")) == ["аb", "aь", "аь"]

    def test_plural(self, fuzzer):
        assert list(fuzzer._plural("google")) == ["goosgle", "googsle"]
        assert list(fuzzer._plural("abc")) == []

    def test_combosquatting(self):
        fuzzer = Fuzzer(dictionary=["login"])
        assert list(fuzzer._combosquatting("ex")) == ["loginex", "login-ex", "exlogin", "ex-login"]

    def test_combosquatting_replaces_hyphenated_parts(self):
        fuzzer = Fuzzer(dictionary=["login"])
        results = list(fuzzer._combosquatting("my-shop"))
        assert "my-login" in results
        assert "login-shop" in results

    def test_homoglyph_single_substitutions_come_first(self, fuzzer):
        results = list(fuzzer._homoglyph("o"))
        assert "0" in results
        assert "ö" in results

    def test_homoglyph_respects_limit(self):
        fuzzer = Fuzzer(homoglyph_limit=5)
        assert len(list(fuzzer._homoglyph("example"))) == 5

    def test_glyph_map_puts_ascii_lookalikes_first(self, fuzzer):
        glyphs = fuzzer._glyph_map("com")
        assert glyphs["o"][0] == "0"
        assert "o" not in glyphs["o"]
        assert len(glyphs["o"]) == len(set(glyphs["o"]))

    def test_strategy_methods_are_documented(self, fuzzer):
        for method in [*fuzzer._root_fuzzers.values(), fuzzer._homoglyph, fuzzer._tld_variation]:
            assert method.__doc__, method.__name__


class TestGenerate:
    def test_candidates_are_tagged_and_rebuilt(self, fuzzer, example):
        candidates = list(fuzzer.generate(example, MutationKind.OMISSION))
        assert Candidate("xample.com", "com", MutationKind.OMISSION) in candidates
        assert all(c.kind is MutationKind.OMISSION for c in candidates)
        assert all(c.tld == "com" for c in candidates)

    def test_generate_accepts_kind_names(self, fuzzer, example):
        assert list(fuzzer.generate(example, "omission")) == list(fuzzer.generate(example, MutationKind.OMISSION))

    def test_subdomain_prefix_is_kept(self, fuzzer):
        parsed = parse("www.example.com")
        fqdns = {c.fqdn for c in fuzzer.generate(parsed, MutationKind.REPETITION)}
        assert "www.eexample.com" in fqdns

    def test_tld_variation_reports_candidate_suffix(self, example):
        fuzzer = Fuzzer(tld_dictionary=["net", "com", "co.uk"])
        candidates = list(fuzzer.generate(example, MutationKind.TLD_VARIATION))
        assert [(c.fqdn, c.tld) for c in candidates] == [("example.net", "net"), ("example.co.uk", "co.uk")]

    def test_unknown_tlds_are_dropped(self, example):
        fuzzer = Fuzzer(tld_dictionary=["net", "notarealsuffix"])
        assert [c.fqdn for c in fuzzer.generate(example, MutationKind.TLD_VARIATION)] == ["example.net"]

    def test_subdomain_kind_reparses(self, fuzzer, example):
        candidates = {c.fqdn: c for c in fuzzer.generate(example, MutationKind.SUBDOMAIN)}
        assert candidates["ex.ample.com"].tld == "com"

    def test_homoglyphs_are_punycode(self, fuzzer, example):
        fqdns = [c.fqdn for c in fuzzer.generate(example, MutationKind.HOMOGLYPH)]
        assert fqdns
        assert any(f.startswith("xn--") for f in fqdns)
        assert all(f.isascii() for f in fqdns)

    @pytest.mark.parametrize("kind", [MutationKind.TLD_VARIATION, MutationKind.COMBOSQUATTING])
    def test_empty_tables_emit_nothing(self, example, kind):
        fuzzer = Fuzzer(dictionary=[], tld_dictionary=[])
        assert list(fuzzer.generate(example, kind)) == []

    @pytest.mark.parametrize("kind", [MutationKind.OMISSION, MutationKind.TRANSPOSITION])
    def test_one_character_root_is_degenerate(self, fuzzer, kind):
        assert list(fuzzer.generate(parse("a.co"), kind)) == []

    def test_illegal_byproducts_are_dropped(self, fuzzer):
        # Omitting a character next to the hyphen would leave a label ending in '-'
        fqdns = {c.fqdn for c in fuzzer.generate(parse("ab-c.com"), MutationKind.OMISSION)}
        assert fqdns == {"b-c.com", "a-c.com", "abc.com"}

    def test_failing_strategy_does_not_raise(self, fuzzer, example, monkeypatch):
        def broken(text):
            yield "fine"
            raise RuntimeError("boom")
        monkeypatch.setitem(fuzzer._root_fuzzers, MutationKind.OMISSION, broken)
        assert [c.fqdn for c in fuzzer.generate(example, MutationKind.OMISSION)] == ["fine.com"]

    def test_every_candidate_reparses(self, fuzzer, example):
        for candidate in fuzzer.generate_all(example):
            reparsed = parse(candidate.fqdn)
            assert reparsed.fqdn == candidate.fqdn
            assert reparsed.tld == candidate.tld

    def test_generation_is_deterministic(self, fuzzer, example):
        first = [(c.fqdn, c.kind) for c in fuzzer.generate_all(example)]
        second = [(c.fqdn, c.kind) for c in Fuzzer().generate_all(example)]
        assert first == second

    def test_candidates_pass_the_fqdn_check(self, fuzzer, example, monkeypatch):
        checked = []

        def reject(domain):
            checked.append(domain)
            return False
        monkeypatch.setattr("domaintwist.services.fuzzer.is_valid_fqdn", reject)
        assert list(fuzzer.generate(example, MutationKind.OMISSION)) == []
        assert "xample.com" in checked
