import unittest

from ipo_syndicate.pdf_extraction.extractors.section_locator import SectionLocator
from ipo_syndicate.pdf_extraction.utils.text_processing import TextProcessor
from ipo_syndicate.tests import fixtures


class TestSectionLocator(unittest.TestCase):
    def setUp(self):
        """Set up for each test"""
        self.locator = SectionLocator()
        self.text_processor = TextProcessor()

    def test_table_of_contents_entry_is_rejected(self):
        """Test a dot-leader index entry is never the section"""
        result = self.locator.locate(fixtures.TOC_ENTRY)
        self.assertFalse(result.section_found)
        self.assertTrue(result.candidate.is_toc)
        self.assertEqual(len(result.candidates), 1)

    def test_picks_real_section_over_toc_and_cross_reference(self):
        """Test the authoritative occurrence wins"""
        text = self.text_processor.join_pages(fixtures.full_document())
        result = self.locator.locate(text)

        self.assertTrue(result.section_found)
        self.assertEqual(len(result.candidates), 3)
        self.assertTrue(result.candidates[0].is_toc)
        self.assertFalse(result.candidates[1].is_toc)
        self.assertFalse(result.candidates[1].is_authoritative)
        self.assertEqual(
            result.candidate.start_offset,
            text.index('DIRECTORS AND PARTIES INVOLVED IN THE GLOBAL OFFERING')
        )
        self.assertEqual(result.candidate.bank_count, 3)

    def test_section_ends_at_next_party_heading(self):
        """Test the section text stops before the legal advisers"""
        result = self.locator.locate(fixtures.TAB_LAYOUT)
        self.assertTrue(result.section_found)
        self.assertIn('Haitong International Securities Company Limited', result.candidate.section_text)
        self.assertNotIn('Legal Advisers', result.candidate.section_text)

    def test_section_text_is_capped(self):
        """Test the maximum section length"""
        locator = SectionLocator(max_section=300)
        result = locator.locate(fixtures.LINE_BREAK_LAYOUT + 'x' * 1000)
        self.assertLessEqual(len(result.candidate.section_text), 300)

    def test_prose_mention_is_not_authoritative(self):
        """Test that a cross reference alone does not count as the section"""
        result = self.locator.locate(fixtures.CROSS_REFERENCE)
        self.assertFalse(result.section_found)
        self.assertIsNotNone(result.candidate)
        self.assertFalse(result.candidate.is_toc)
        self.assertIn('Parties Involved', result.candidate.context_window)

    def test_no_title(self):
        """Test a document without the section title"""
        result = self.locator.locate('SUMMARY\nThis prospectus contains no syndicate.\n')
        self.assertFalse(result.section_found)
        self.assertIsNone(result.candidate)
        self.assertEqual(result.candidates, ())

    def test_directors_prefix_prefers_earliest_on_tie(self):
        """Test the combined title wins over its own sub-heading"""
        result = self.locator.locate(fixtures.DIRECTORS_PREFIX)
        self.assertTrue(result.section_found)
        self.assertEqual(result.candidate.start_offset, 0)
        self.assertEqual(result.candidate.matched_phrase, 'DIRECTORS AND PARTIES INVOLVED IN THE GLOBAL OFFERING')

    def test_running_header_loses_to_section_start(self):
        """Test a repeated page header does not displace the section start"""
        text = (
            'PARTIES INVOLVED IN THE GLOBAL OFFERING\n'
            'Joint Sponsors\tMorgan Stanley Asia Limited\n'
            '\tCICC Limited\n'
            '– 66 –\n'
            'PARTIES INVOLVED IN THE GLOBAL OFFERING\n'
            'Joint Bookrunners\tCICC Limited\n'
            '\t46/F, International Commerce Centre\n'
            '\t1 Austin Road West\n'
        )
        result = self.locator.locate(text)
        self.assertEqual(len(result.candidates), 2)
        self.assertEqual(result.candidate.start_offset, 0)
        self.assertEqual(result.candidate.bank_count, 2)

    def test_lost_tabs_section_is_authoritative(self):
        """Test fused heading lines still mark the section"""
        result = self.locator.locate(fixtures.LOST_TABS)
        self.assertTrue(result.section_found)
        self.assertEqual(result.candidate.bank_count, 2)

    def test_best_diagnostic_window_when_nothing_qualifies(self):
        """Test the unqualified window with the most role words is surfaced"""
        prose = (
            'PARTIES INVOLVED IN THE GLOBAL OFFERING\n'
            'The Joint Sponsors and the Underwriters are named in the Underwriting section.\n'
        )
        text = fixtures.CROSS_REFERENCE + prose + fixtures.FILLER
        result = self.locator.locate(text)

        self.assertFalse(result.section_found)
        self.assertEqual(len(result.candidates), 2)
        self.assertEqual(result.candidate.start_offset, text.index(prose))
        self.assertGreater(result.candidate.role_hits, result.candidates[0].role_hits)

    def test_trial_parse_is_kept_on_candidate(self):
        """Test the winning candidate carries its parsed appointments"""
        result = self.locator.locate(fixtures.TAB_LAYOUT)
        self.assertEqual(
            [a.bank.normalized_name for a in result.candidate.appointments],
            ['Deutsche Bank', 'Morgan Stanley', 'Haitong']
        )

    def test_section_without_banks_is_still_found(self):
        """Test that a section with headings but no banks is reported found"""
        result = self.locator.locate(fixtures.NO_BANKS)
        self.assertTrue(result.section_found)
        self.assertEqual(result.candidate.bank_count, 0)


if __name__ == '__main__':
    unittest.main()
