"""Tests for crispr_design.designer module."""

import pytest
from crispr_design.config import NucleaseType
from crispr_design.core.models import Site
from crispr_design.core.scoring import score_spacer
from crispr_design.designer import DesignResult, assemble_sites, design_guides
from crispr_design.exceptions import InvalidSequenceError, UnknownProfileError
from crispr_design.utils.sequence import reverse_complement


# BFP amplicon fragment
BFP_REFERENCE = (
    "TGACCCTGAAGTTCATCTGCACCACCGGCAAGCTGCCCGTGCCCTGGCCCACCCTCGTGACCACCCTGACC"
    "CACGGCGTGCAGTGCTTCAGCCGCTACCCCGACCACATGAAGCAGCACGACTTCTTCAAGTCCGCCATGCC"
    "CGAAGGCTACGTCCAGGAGCGCACCAT"
)

ALL_PAM_TYPES = ["SpCas9", "SpCas9-VRQR", "xCas9", "Cas12a", "Cas12f"]


def make_site(position, strand, score):
    return Site(position=position, pam_site="AGG", strand=strand, grna_sequence="A" * 20,
                grna_start=1, grna_end=20, score=score)


class TestAssembleSites:
    """Test ranking of merged sites."""

    def test_sorted_by_descending_score(self):
        forward = [make_site(30, '+', 50), make_site(40, '+', 90)]
        reverse = [make_site(35, '-', 70)]
        ranked = assemble_sites(forward, reverse)
        assert [s.score for s in ranked] == [90, 70, 50]

    def test_ties_keep_discovery_order(self):
        """Test equal scores keep forward-before-reverse and scan order."""
        forward = [make_site(30, '+', 80), make_site(50, '+', 80)]
        reverse = [make_site(60, '-', 80), make_site(20, '-', 80)]
        ranked = assemble_sites(forward, reverse)
        assert [(s.strand, s.position) for s in ranked] == [
            ('+', 30), ('+', 50), ('-', 60), ('-', 20),
        ]

    def test_no_deduplication(self):
        forward = [make_site(3, '+', 80)]
        reverse = [make_site(3, '-', 80)]
        assert len(assemble_sites(forward, reverse)) == 2

    def test_empty(self):
        assert assemble_sites([], []) == []


class TestDesignGuides:
    """Test the design entry point."""

    def test_single_forward_site(self):
        result = design_guides("A" * 20 + "CGG", "SpCas9", "poly_a")
        assert result.sequence_name == "poly_a"
        assert result.pam_type == "SpCas9"
        assert result.sequence_length == 23
        assert len(result.sites) == 1
        site = result.sites[0]
        assert (site.strand, site.position, site.pam_site) == ('+', 21, "CGG")
        assert (site.grna_start, site.grna_end) == (1, 20)

    def test_lowercase_input(self):
        """Test input is canonicalized to uppercase before scanning."""
        upper = design_guides(BFP_REFERENCE, "SpCas9")
        lower = design_guides(BFP_REFERENCE.lower(), "SpCas9")
        assert lower.sites == upper.sites

    def test_invalid_characters_are_stripped(self):
        result = design_guides("  " + "a" * 20 + "\ncgg 12\n", "SpCas9")
        assert result.sequence_length == 23
        assert len(result.sites) == 1

    def test_accepts_enum(self):
        result = design_guides(BFP_REFERENCE, NucleaseType.CAS12A)
        assert result.pam_type == "Cas12a"

    def test_empty_sequence_raises(self):
        with pytest.raises(InvalidSequenceError):
            design_guides("", "SpCas9")

    def test_fully_invalid_sequence_raises(self):
        with pytest.raises(InvalidSequenceError, match="no valid nucleotides"):
            design_guides("1234 !!! xyz", "SpCas9")

    def test_unknown_profile_checked_first(self):
        """Test the profile is rejected before the sequence is examined."""
        with pytest.raises(UnknownProfileError):
            design_guides("", "Cas99")

    def test_all_n_sequence_is_valid_with_no_sites(self):
        """Test that no matches is an empty result, not an error."""
        result = design_guides("N" * 50, "SpCas9")
        assert result.sites == []
        assert result.sequence_length == 50

    def test_short_sequence_has_no_sites(self):
        result = design_guides("ACGTAGGCCT", "SpCas9")
        assert result.sites == []

    def test_default_sequence_name(self):
        assert design_guides("ACGT", "SpCas9").sequence_name == "Target_Sequence"


class TestDesignInvariants:
    """Test coordinate and ordering invariants on a real amplicon."""

    @pytest.mark.parametrize("pam_type", ALL_PAM_TYPES)
    def test_coordinates_within_bounds(self, pam_type):
        result = design_guides(BFP_REFERENCE, pam_type)
        length = result.sequence_length
        for site in result.sites:
            assert 1 <= site.grna_start <= site.grna_end <= length
            assert 1 <= site.position <= length
            assert 1 <= site.pam_end <= length

    @pytest.mark.parametrize("pam_type", ALL_PAM_TYPES)
    def test_sites_match_sequence(self, pam_type):
        """Test every site's PAM and spacer can be read back from the sequence."""
        result = design_guides(BFP_REFERENCE, pam_type)
        for site in result.sites:
            pam_span = BFP_REFERENCE[site.position - 1:site.pam_end]
            spacer_span = BFP_REFERENCE[site.grna_start - 1:site.grna_end]
            if site.strand == '+':
                assert site.pam_site == pam_span
                assert site.grna_sequence == spacer_span
            else:
                assert site.pam_site == reverse_complement(pam_span)
                assert site.grna_sequence == reverse_complement(spacer_span)
            assert site.score == score_spacer(site.grna_sequence)
            assert 0 <= site.score <= 100

    @pytest.mark.parametrize("pam_type", ALL_PAM_TYPES)
    def test_spacer_lengths(self, pam_type):
        result = design_guides(BFP_REFERENCE, pam_type)
        expected = 23 if pam_type.startswith("Cas12") else 20
        for site in result.sites:
            assert len(site.grna_sequence) == expected
            assert site.grna_end - site.grna_start + 1 == expected

    def test_spcas9_finds_both_strands(self):
        strands = {s.strand for s in design_guides(BFP_REFERENCE, "SpCas9").sites}
        assert strands == {'+', '-'}

    @pytest.mark.parametrize("pam_type", ALL_PAM_TYPES)
    def test_ranking_is_stable(self, pam_type):
        """Test non-increasing scores, with ties in discovery order."""
        sites = design_guides(BFP_REFERENCE, pam_type).sites
        for a, b in zip(sites, sites[1:]):
            assert a.score >= b.score
            if a.score == b.score:
                assert (a.strand, b.strand) != ('-', '+')
                if a.strand == b.strand == '+':
                    assert a.position < b.position
                elif a.strand == b.strand == '-':
                    # Reverse-complement scan order runs right to left on the forward strand
                    assert a.position > b.position


class TestDesignResult:
    """Test DesignResult helpers."""

    def test_high_quality_sites(self):
        result = DesignResult(
            sequence_name="x", pam_type="SpCas9", sequence_length=100,
            sites=[make_site(30, '+', 100), make_site(40, '+', 80), make_site(50, '-', 70)],
        )
        assert [s.score for s in result.high_quality_sites] == [100, 80]

    def test_to_dict(self):
        result = design_guides("A" * 20 + "CGG", "SpCas9", "poly_a")
        data = result.to_dict()
        assert data['sequenceLength'] == 23
        assert data['pamType'] == "SpCas9"
        assert data['sites'][0]['pamSite'] == "CGG"
        assert 'lwgvAnnotation' not in data

        data = result.to_dict(include_annotation=True)
        assert "begin genome poly_a" in data['lwgvAnnotation']

    def test_to_annotation_uses_sequence_name(self):
        result = design_guides("A" * 20 + "CGG", "SpCas9", "locus_1")
        annotation = result.to_annotation()
        assert "showGenome(locus_1)" in annotation
        assert "track PAM_1_+ addPairs(21:23)" in annotation

    def test_print_summary(self, capsys):
        result = design_guides("A" * 20 + "CGG", "SpCas9", "poly_a")
        result.print_summary()
        out = capsys.readouterr().out
        assert "Sites found: 1" in out
        assert "High quality sites (score >= 80): 0" in out
        assert "CGG" in out

    def test_print_summary_no_sites(self, capsys):
        DesignResult("empty", "SpCas9", 0).print_summary()
        assert "No CRISPR sites found" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
