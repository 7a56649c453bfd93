import unittest

from ipo_syndicate.pdf_extraction.extractors.bank_classifier import BankNameClassifier


class TestBankNameClassifier(unittest.TestCase):
    def setUp(self):
        """Set up for each test"""
        self.classifier = BankNameClassifier()

    def test_accepts_bank_names(self):
        """Test that typical syndicate entities are accepted"""
        for name in [
            'Morgan Stanley Asia Limited',
            'Goldman Sachs (Asia) L.L.C.',
            'CICC Limited',
            'UBS AG Hong Kong Branch',
            'The Hongkong and Shanghai Banking Corporation Limited',
            'Futu Securities International (Hong Kong) Limited',
        ]:
            with self.subTest(name=name):
                self.assertTrue(self.classifier.is_bank_name(name))

    def test_rejects_layout_noise(self):
        """Test that addresses, labels and notes are rejected"""
        for line in [
            '46/F, International Commerce Centre',
            '1 Austin Road West',
            'Hong Kong',
            '(in alphabetical order)',
            'Securities Limited',
            'HKSCC Nominees Limited',
            'ABC Technology Co., Ltd.',
            'Short Ltd',
            'Morgan Stanley Asia Limited and Goldman Sachs (Asia) L.L.C.',
            '(A licensed corporation to carry on Type 6 regulated activity under the SFO)',
            'Freshfields Bruckhaus Deringer',
            'Joint Sponsors, Overall Coordinators and Capital Market Intermediaries CICC Limited',
            'HSBC will act as agent for the offer made by Example Holdings Limited',
        ]:
            with self.subTest(line=line):
                self.assertIsNone(self.classifier.classify(line))

    def test_clean_line_strips_prefixes_and_nicknames(self):
        """Test cleanup of merged role and location prefixes"""
        self.assertEqual(
            self.classifier.clean_line('Joint Sponsors Morgan Stanley Asia Limited'),
            'Morgan Stanley Asia Limited'
        )
        self.assertEqual(
            self.classifier.clean_line('Central Hong Kong Morgan Stanley Asia Limited'),
            'Morgan Stanley Asia Limited'
        )
        self.assertEqual(
            self.classifier.clean_line('The Hongkong and Shanghai Banking Corporation Limited, or HSBC'),
            'The Hongkong and Shanghai Banking Corporation Limited'
        )
        self.assertEqual(self.classifier.clean_line('  CICC\u0002 Limited  '), 'CICC Limited')

    def test_classify_returns_raw_and_normalized_names(self):
        """Test the candidate produced for an accepted line"""
        candidate = self.classifier.classify('Deutsche Securities Asia Limited')
        self.assertEqual(candidate.raw_name, 'Deutsche Securities Asia Limited')
        self.assertEqual(candidate.normalized_name, 'Deutsche Bank')
        self.assertEqual(candidate.key, 'deutsche bank')

    def test_normalize_known_banks(self):
        """Test alias mapping of common entity names"""
        expected = {
            'Deutsche Securities Asia Limited': 'Deutsche Bank',
            'CICC Limited': 'CICC',
            'China International Capital Corporation Hong Kong Securities Limited': 'CICC',
            'J.P. Morgan Securities (Far East) Limited': 'J.P. Morgan',
            'Merrill Lynch (Asia Pacific) Limited': 'Bank of America',
            'The Hongkong and Shanghai Banking Corporation Limited': 'HSBC',
            'UBS AG Hong Kong Branch': 'UBS',
            'Goldman Sachs (Asia) L.L.C.': 'Goldman Sachs',
            'Haitong International Securities Company Limited': 'Haitong',
        }
        for raw, canonical in expected.items():
            with self.subTest(raw=raw):
                self.assertEqual(self.classifier.normalize(raw), canonical)

    def test_normalize_prefers_longest_alias(self):
        """Test that specific aliases win over their shorter prefixes"""
        self.assertEqual(self.classifier.normalize('Guotai Junan Capital Limited'), 'Guotai Junan Capital')
        self.assertEqual(
            self.classifier.normalize('Guotai Junan Securities (Hong Kong) Limited'),
            'Guotai Junan Securities'
        )
        self.assertEqual(self.classifier.normalize('Guotai Junan International Limited'), 'Guotai Junan')

    def test_short_aliases_need_whole_words(self):
        """Test that acronyms are not found inside longer words"""
        self.assertEqual(self.classifier.normalize('Ingenious Securities Limited'), 'Ingenious Securities')
        self.assertEqual(self.classifier.normalize('ING Bank N.V.'), 'ING')

    def test_normalize_unknown_bank_keeps_cleaned_name(self):
        """Test that unknown banks lose only qualifiers and suffixes"""
        self.assertEqual(self.classifier.normalize('Valuable Capital Limited'), 'Valuable Capital')
        self.assertEqual(self.classifier.normalize('Bank of China (Hong Kong) Limited'), 'Bank of China')

    def test_normalize_is_idempotent(self):
        """Test normalize(normalize(x)) == normalize(x)"""
        for name in [
            'Deutsche Securities Asia Limited',
            'Valuable Capital Limited',
            'The Hongkong and Shanghai Banking Corporation Limited',
            'Huatai Securities Co., Ltd.',
            'Limited',
            'The Limited',
        ]:
            with self.subTest(name=name):
                once = self.classifier.normalize(name)
                self.assertEqual(self.classifier.normalize(once), once)

    def test_issuer_name_is_rejected(self):
        """Test that the issuer is never treated as a bank"""
        classifier = BankNameClassifier(issuer_name='Huatai Securities')
        self.assertTrue(classifier.is_issuer_name('Huatai Securities Co., Ltd.'))
        self.assertTrue(classifier.is_issuer_name('HUATAI SECURITIES CO., LTD.'))
        self.assertIsNone(classifier.classify('Huatai Securities Co., Ltd.'))
        self.assertIsNotNone(classifier.classify('Huatai Financial Holdings (Hong Kong) Limited'))

    def test_without_issuer_nothing_is_issuer(self):
        """Test default classifier has no issuer"""
        self.assertFalse(self.classifier.is_issuer_name('Huatai Securities Co., Ltd.'))


if __name__ == '__main__':
    unittest.main()
