import re
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Pattern, Tuple

from ..models import RoleToken

# Bump whenever a table below changes so stored results can be traced to the rules that produced them.
RULES_VERSION = "2026.10.2"

S, C, B, L, O = (RoleToken.SPONSOR, RoleToken.COORDINATOR, RoleToken.BOOKRUNNER,
                 RoleToken.LEAD_MANAGER, RoleToken.OTHER)


@dataclass(frozen=True)
class RuleSet:
    """Compiled, read-only rule tables shared by the classifiers."""

    version: str
    role_headings: Tuple[Tuple[Pattern, FrozenSet[RoleToken]], ...]
    role_keywords: Tuple[Tuple[Pattern, RoleToken], ...]
    role_shape: Pattern
    heading_exclusion: Pattern
    heading_bank_words: Pattern
    section_title: Pattern
    toc_leader: Pattern
    tab_after_heading: Pattern
    section_end_markers: Tuple[Pattern, ...]
    extractor_stop_markers: Tuple[Pattern, ...]
    page_furniture: Tuple[Pattern, ...]
    entity_suffix: Pattern
    bank_start: Pattern
    role_prefix: Pattern
    location_prefix: Pattern
    nickname_suffix: Pattern
    boilerplate: Tuple[Pattern, ...]
    street_words: Pattern
    noise_entities: Tuple[Pattern, ...]
    company_keywords: Tuple[str, ...]
    company_exceptions: Tuple[str, ...]
    jurisdiction_qualifiers: Tuple[Pattern, ...]
    legal_suffix: Pattern
    leading_article: Pattern
    bank_aliases: Tuple[Tuple[Pattern, str], ...]
    wrapped_bank_start: Tuple[Pattern, ...]
    bank_continuation: Tuple[Pattern, ...]
    known_bank_patterns: Tuple[Pattern, ...]


class PatternRegistry:
    """Central repository for regex patterns used in extraction."""

    @staticmethod
    def get_role_patterns():
        """Get role heading patterns, matched in order against a normalized heading."""
        return {
            'role_headings': [
                (r'^(?:joint\s+)?(?:sole\s+)?sponsors?$', (S,)),
                (r'^(?:joint\s+)?(?:sole\s+)?sponsors?\s+and\s+(?:compliance\s+)?advis[eo]rs?$', (S,)),
                (r'^(?:joint\s+|sole\s+)?sponsors?\s*(?:and|,|&)\s*(?:joint\s+|sole\s+)?(?:overall\s+|global\s+)?coordinators?$', (S, C)),
                (r'^(?:joint\s+|sole\s+)?(?:global\s+|overall\s+)?coordinators?\s+and$', (C, S)),
                (r'^(?:joint\s+|sole\s+)?(?:global\s+|overall\s+)?coordinators?$', (C,)),
                (r'^(?:joint\s+|sole\s+)?representatives?$', (C,)),
                (r'^(?:joint\s+|sole\s+)?(?:global\s+|overall\s+)?coordinators?,?\s*(?:joint\s+)?bookrunners?,?\s+and\s+(?:joint\s+)?lead\s*managers?$', (C, B, L)),
                (r'^(?:joint\s+|sole\s+)?(?:global\s+|overall\s+)?coordinators?\s+and\s+(?:joint\s+)?bookrunners?$', (C, B)),
                (r'^(?:joint\s+|sole\s+)?bookrunners?\s+and\s+(?:joint\s+)?lead\s*managers?$', (B, L)),
                (r'^(?:joint\s+|sole\s+)?(?:global\s+)?bookrunners?$', (B,)),
                (r'^(?:joint\s+|sole\s+)?lead\s*managers?$', (L,)),
                (r'^(?:joint\s+)?co\s*lead\s*managers?$', (L,)),
                (r'^(?:joint\s+|sole\s+)?financial\s+advis[eo]rs?$', (O,)),
                (r'^(?:joint\s+|sole\s+)?placing\s+agents?$', (O,)),
                (r'^(?:joint\s+|sole\s+)?listing\s+agents?$', (O,)),
                (r'^(?:sole\s+)?compliance\s+advis[eo]rs?$', (O,)),
                (r'^receiving\s+banks?$', (O,)),
                (r'^capital\s+market\s+intermediar(?:y|ies)$', (B,)),
                (r'^(?:joint\s+|sole\s+)?(?:hong\s+kong\s+|international\s+)?(?:public\s+offer(?:ing)?\s+|placing\s+)?underwriters?$', (B,)),
            ],
            'role_keywords': [
                (r'sponsor', S),
                (r'coordinator', C),
                (r'representative', C),
                (r'bookrunner', B),
                (r'intermediar', B),
                (r'underwriter', B),
                (r'lead\s*manager', L),
                (r'listing\s+agent|financial\s+advis|placing\s+agent|compliance\s+advis|stabili[sz]ing\s+manager', O),
            ],
            'role_shape': r'sponsor|coordinator|bookrunner|manager|representative|intermediar|underwriter',
            'heading_exclusion': r'\b(?:legal|auditors?|accountants?|counsel|valuers?|consultants?|registrars?|to\s+the|is|are|was|were|will|shall|has|have|may|our)\b',
            'heading_bank_words': r'\b(?:limited|ltd|securities|corporation|l\.l\.c|llc|plc|branch)\b',
        }

    @staticmethod
    def get_section_patterns():
        """Get patterns that locate and bound the parties section."""
        heading_word = r'(?:Sponsors?|Coordinators?|Bookrunners?|Managers?|Representatives?|Intermediar(?:y|ies)|Underwriters?)'
        return {
            'section_title': r'(?:directors\s+and\s+)?parties\s+involved(?:\s+in\s+the\s+(?:[a-z][\w\-]*\s+){0,2}?(?:offering|spin-off|introduction|listing))?',
            'toc_leader': r'(?:[.·…]\s*){3,}\s*\d{1,4}\b',
            'tab_after_heading': heading_word + r'[ ]*\t',
            'section_end_markers': [
                r'^[ \t]*(?:Our\s+)?Legal\s+Advis[eo]rs?\b',
                r'^[ \t]*Auditors?\b',
                r'^[ \t]*Reporting\s+Accountants?\b',
                r'^[ \t]*Industry\s+Consultants?\b',
                r'^[ \t]*Property\s+Valuers?\b',
                r'^[ \t]*(?:Hong\s+Kong\s+)?(?:H\s+)?Share\s+Registrar\b',
                r'^[ \t]*Registered\s+Office\b',
                r'^[ \t]*Principal\s+Place\s+of\s+Business\b',
                r'^[ \t]*CORPORATE\s+INFORMATION\b',
                r'^[ \t]*HISTORY\s+AND\b',
            ],
            'extractor_stop_markers': [
                r'^Note:',
            ],
            'page_furniture': [
                r'^[–—\-]\s*[ivxlc\d]+\s*[–—\-]$',
                r'^(?:page\s+)?\d{1,4}$',
            ],
        }

    @staticmethod
    def get_bank_patterns():
        """Get patterns for bank name recognition and cleanup."""
        return {
            'entity_suffix': r'(?:(?i:limited|ltd\.?|branch|l\.l\.c\.?|llc|plc|bank)|N\.V\.?|AG|S\.A\.?|CIB)$',
            'bank_start': r'^(?:[A-Z]|The\s)',
            'role_prefix': r'^(?:Financial\s+Advis[eo]rs?|Sole\s+Sponsor|Joint\s+Sponsors?|Compliance\s+Advis[eo]rs?|Receiving\s+Bank|Placing\s+Underwriters?|Public\s+Offer\s+Underwriters?|and\s+Capital\s+Market\s+Intermediar(?:y|ies))\s+',
            'location_prefix': r'^(?:Central\s+Hong\s+Kong|Hong\s+Kong|Central|Kowloon|Admiralty|Wan\s*Chai)\s+(?=(?-i:[A-Z]))',
            'nickname_suffix': r'^(.+?(?:Limited|Branch|L\.L\.C\.?)),?\s+or\s+.*$',
            'boilerplate': [
                r'regulated\s+activit(?:y|ies)|under\s+the\s+SFO|Type\s+\d+\s+licen[cs]e|corporate\s+finance\)',
                r'^\((?!Hong\s+Kong\))[a-z]',
                r'^\d+.*\bFloor\b',
                r'^\d+/F\b',
                r'^(?:Room|Unit|Suite|Flat|Level)\s+\d',
                r'^(?:Tower|Building|Centre|Center|Plaza|House)\b',
                r'^\d+\s+[A-Z]',
                r'^(?:Hong\s+Kong|Central|Kowloon|Wan\s*Chai|Wanchai|Admiralty|Tsim\s*Sha\s*Tsui|Causeway\s*Bay|Quarry\s*Bay|North\s*Point|Sheung\s*Wan|Canary\s+Wharf|London)$',
                r'^(?:PRC|the\s+PRC|China|United\s+Kingdom|Cayman\s+Islands|British\s+Virgin\s+Islands|Bermuda|Singapore|Japan|United\s+States(?:\s+of\s+America)?)$',
                r'^\(in\s+relation\s+to',
                r'^\(.*only\)$',
                r'Articles\s+of\s+Association|Alibaba\s+Partnership|to\s+nominate',
            ],
            'street_words': r'\b(?:Road|Street|Avenue|Square)\b',
            'noise_entities': [
                r'^and\s',
                r'\d{4,}',
                r'[<>{}\[\]]',
                r'["“”]',
                r'https?:',
                r'\.(?:com|org|net|hk)\b',
                r'hospital|medical|pharmaceutical',
                r'technology\s+co\b',
                r'group\s+co\.,?\s+ltd',
                r'\b(?:does|will|shall|is|are)\s+not\b',
                r'\b(?:will|shall|would|has|have|is|are|was|were)\s',
                r'[a-z]{2,}\.\s+[A-Z]',
                r'Limited\s+and\s+',
                r'Limited\s*,\s*[A-Z]',
                r'^(?:Futures|Securities|Capital|Investment)\s+Limited$',
                r'nominees?\s+limited',
                r'custodian',
                r'trustee',
            ],
            'company_keywords': [
                'TECHNOLOGY CO', 'BIOTECH', 'PHARMACEUTICAL CO', 'BIOPHARMACEUTICAL',
                'ELECTRONICS CO', 'SEMICONDUCTOR CO', 'SOFTWARE', 'DIGITAL TECH',
                'MEDICAL CO', 'HEALTHCARE CO', 'THERAPEUTICS', 'BIOSCIENCE', 'GENOMICS',
                'ENERGY CO', 'SOLAR', 'ELECTRIC CO', 'MOTOR CO', 'AUTOMOTIVE', 'VEHICLE',
                'FOOD CO', 'BEVERAGE', 'CONSUMER', 'RETAIL', 'E-COMMERCE',
                'MANUFACTURING', 'INDUSTRIAL CO', 'MACHINERY', 'EQUIPMENT CO',
                'CONSTRUCTION', 'PROPERTY', 'REAL ESTATE',
                'ENTERTAINMENT', 'MEDIA CO', 'EDUCATION', 'TOURISM',
                'AGRICULTURE', 'MINING', 'RESOURCES CO',
                'ROBOTICS', 'ROBOT CO', 'ARTIFICIAL INTELLIGENCE CO',
                'CLOUD CO', 'INFORMATION TECH', 'LOGISTICS', 'SUPPLY CHAIN',
                'COSMETICS', 'BEAUTY', 'FASHION', 'APPAREL', 'SMART TECHNOLOGY',
            ],
            'company_exceptions': ['SECURITIES', 'CAPITAL', 'BANK'],
            'jurisdiction_qualifiers': [
                r'\(Hong\s+Kong\)', r'\(Asia\s+Pacific\)', r'\(Asia\)', r'\(HK\)',
                r'\(Far\s+East\)', r'\(Singapore\)', r'\(International\)',
            ],
            'legal_suffix': r'(?:(?:,\s*|\s+)(?:Limited|Ltd\.?|L\.L\.C\.?|LLC|Co\.,?|Corporation|Corp\.?|Company|Plc|PLC|AG|S\.A\.?|N\.V\.?|Hong\s+Kong\s+Branch|Branch)|,)\s*$',
            'leading_article': r'^(?:The\s+)+',
            'wrapped_bank_start': [
                r'^[A-Z][A-Za-z\s&()]*\b(?:Corporation|International|Capital|Securities|Group|Holdings|Bank|Banking|Finance|Financial|Partners|Sachs|Stanley|Suisse|Morgan|Barclays|Deutsche|Goldman|Merrill|Huatai|Haitong|CICC|HSBC|UBS|BNP|BOCI|CMB|ICBC|CCB|BOCOM)\b',
                r'^(?:The\s+)?[A-Z][A-Za-z\s&]+(?:Hong\s+Kong|Corporation|Capital|Securities|Bank)$',
            ],
            'bank_continuation': [
                r'^(?:(?:Securities|Capital|Holdings|Asia|Hong\s+Kong|China|International|Corporation)\s+)?Limited(?:\s*\()?$',
                r'^\([A-Z][A-Za-z ]+\)\s+Limited$',
                r'^Limited,?\s+or\s+',
                r'^(?:Hong\s+Kong|Asia|Pacific|China)$',
                r'^(?:L\.L\.C\.?|LLC|Plc|PLC|Branch)$',
                r'^Hong\s+Kong\s+Securities\s+Limited',
                r'^[A-Z][A-Za-z\s&()]*\bLimited$',
            ],
        }

    @staticmethod
    def get_bank_aliases():
        """Canonical bank names and the variations that map onto them, in table order."""
        return [
            ('Goldman Sachs', ['Goldman Sachs', 'GS']),
            ('Morgan Stanley', ['Morgan Stanley']),
            ('J.P. Morgan', ['J.P. Morgan', 'J. P. Morgan', 'JP Morgan', 'JPMorgan']),
            ('Citi', ['Citigroup Global Markets', 'Citigroup', 'Citibank', 'Citi']),
            ('Bank of America', ['Bank of America', 'BofA Securities', 'BofA', 'Merrill Lynch', 'Merrill']),
            ('UBS', ['UBS']),
            ('Credit Suisse', ['Credit Suisse', 'CS']),
            ('Deutsche Bank', ['Deutsche Bank', 'Deutsche']),
            ('Barclays', ['Barclays Capital', 'Barclays']),
            ('HSBC', ['The Hongkong and Shanghai Banking Corporation', 'Hongkong and Shanghai Banking',
                      'Hong Kong and Shanghai Banking', 'HSBC']),
            ('BNP Paribas', ['BNP Paribas', 'BNP']),
            ('Nomura', ['Nomura']),
            ('Daiwa', ['Daiwa']),
            ('DBS', ['DBS']),
            ('CITIC', ['CITIC Securities', 'CITIC CLSA', 'CITIC', 'CLSA']),
            ('CICC', ['China International Capital Corporation', 'China International Capital', 'CICC']),
            ('Huatai', ['Huatai']),
            ('Guotai Junan Capital', ['Guotai Junan Capital']),
            ('Guotai Junan Securities', ['Guotai Junan Securities', 'GTJA Securities']),
            ('Guotai Junan', ['Guotai Junan', 'GTJA']),
            ('Haitong', ['Haitong']),
            ('China Securities', ['China Securities International', 'China Securities', 'CSC']),
            ('GF Securities', ['GF Securities', 'Guangfa Securities', 'GF']),
            ('CMB International', ['China Merchants Bank International', 'CMB International', 'CMBI']),
            ('ICBC International', ['ICBC International', 'ICBCI', 'ICBC']),
            ('BOCI', ['Bank of China International', 'BOC International', 'BOCI']),
            ('CCB International', ['China Construction Bank International', 'CCB International', 'CCBI']),
            ('BOCOM International', ['Bank of Communications International', 'BOCOM International']),
            ('CEB International', ['CEB International', 'China Everbright Securities']),
            ('China Everbright', ['China Everbright', 'Everbright Securities']),
            ('Cinda International', ['Cinda International', 'Cinda']),
            ('China Renaissance', ['China Renaissance', 'Huaxing']),
            ('Fosun', ['Fosun']),
            ('Guosen', ['Guosen']),
            ('China Galaxy', ['China Galaxy', 'Galaxy Securities']),
            ('ABCI', ['Agricultural Bank of China International', 'ABCI']),
            ('CMBC', ['China Minsheng Banking', 'CMBC']),
            ('China Industrial Securities', ['China Industrial Securities']),
            ('Zhongtai', ['Zhongtai']),
            ('Shenwan Hongyuan', ['Shenwan Hongyuan', 'Shenwan', 'SWS']),
            ('Orient Securities', ['Orient Securities', 'DFZQ']),
            ('Founder Securities', ['Founder Securities']),
            ('Essence Corporate Finance', ['Essence Corporate Finance']),
            ('Essence International Securities', ['Essence International Securities']),
            ('SPDB', ['Shanghai Pudong Development Bank', 'SPDB']),
            ('Tiger Brokers', ['Tiger Brokers', 'Tiger Securities']),
            ('Futu', ['Futu']),
            ('Credit Agricole', ['Credit Agricole', 'Crédit Agricole', 'CA-CIB']),
            ('Natixis', ['Natixis']),
            ('Standard Chartered', ['Standard Chartered', 'StanChart']),
            ('Societe Generale', ['Societe Generale', 'Société Générale', 'SocGen']),
            ('Macquarie', ['Macquarie']),
            ('National Australia Bank', ['National Australia Bank', 'NAB']),
            ('Jefferies', ['Jefferies']),
            ('Mizuho', ['Mizuho']),
            ('SMBC', ['Sumitomo Mitsui', 'SMBC']),
            ('OCBC', ['Oversea-Chinese Banking', 'OCBC']),
            ('United Overseas Bank', ['United Overseas Bank', 'UOB']),
            ('ANZ', ['Australia and New Zealand Banking', 'ANZ']),
            ('Westpac', ['Westpac']),
            ('ING', ['ING']),
            ('Longbridge', ['Longbridge', 'Long Bridge']),
            ('9F Primasia', ['9F Primasia', '9F Prime']),
            ('ZINVEST', ['ZINVEST']),
        ]

    @staticmethod
    def get_known_bank_patterns():
        """Entity patterns used to scan a whole document when the section parse finds nothing."""
        return [
            r'\bMorgan\s+Stanley[^,\n]*?(?:Limited|Plc)',
            r'\bGoldman\s+Sachs[^,\n]*?L\.?L\.?C\.?',
            r'\bGoldman\s+Sachs\s+International\b',
            r'\bChina\s+International\s+Capital[^,\n]*?Limited',
            r'\bBOCI\s+Asia[^,\n]*?Limited',
            r'\bHSBC[^,\n]*?Limited',
            r'\bThe\s+Hong\s*kong\s+and\s+Shanghai\s+Banking[^,\n]*?Limited',
            r'\bJ\.?\s?P\.?\s*Morgan[^,\n]*?(?:Limited|Plc)',
            r'\bCiti(?:group|bank)?[^,\n]*?Limited',
            r'\bUBS\s+AG\b',
            r'\bUBS\s+Securities[^,\n]*?(?:Limited|LLC)',
            r'\bCredit\s+Suisse[^,\n]*?Limited',
            r'\bDeutsche\s+(?:Bank|Securities)[^,\n]*?Limited',
            r'\bBNP\s+Paribas[^,\n]*?Limited',
            r'\bHaitong[^,\n]*?Limited',
            r'\bGuotai\s+Junan[^,\n]*?Limited',
            r'\bCCB\s+International[^,\n]*?Limited',
            r'\bICBC\s+International[^,\n]*?Limited',
            r'\bCMB\s+International[^,\n]*?Limited',
            r'\bCITIC[^,\n]*?Limited',
            r'\bCLSA[^,\n]*?Limited',
            r'\bMacquarie[^,\n]*?Limited',
            r'\bNomura[^,\n]*?Limited',
            r'\bBarclays[^,\n]*?(?:Limited|PLC)',
            r'\bMerrill\s+Lynch[^,\n]*?Limited',
            r'\bMerrill\s+Lynch\s+International\b',
            r'\bABCI[^,\n]*?Limited',
            r'\bBOCOM[^,\n]*?Limited',
            r'\bFutu[^,\n]*?Limited',
            r'\bTiger\s+Brokers[^,\n]*?Limited',
        ]

    @classmethod
    def build_rules(cls) -> RuleSet:
        """Compile every table into an immutable RuleSet."""
        roles = cls.get_role_patterns()
        sections = cls.get_section_patterns()
        banks = cls.get_bank_patterns()

        aliases = []
        for canonical, variations in cls.get_bank_aliases():
            for variation in variations:
                aliases.append((variation, canonical))
        # Longest variation wins so that "Guotai Junan Capital" beats "Guotai Junan"
        aliases.sort(key=lambda item: len(item[0]), reverse=True)

        return RuleSet(
            version=RULES_VERSION,
            role_headings=tuple(
                (re.compile(pattern, re.IGNORECASE), frozenset(tokens))
                for pattern, tokens in roles['role_headings']
            ),
            role_keywords=tuple(
                (re.compile(pattern, re.IGNORECASE), token)
                for pattern, token in roles['role_keywords']
            ),
            role_shape=re.compile(roles['role_shape'], re.IGNORECASE),
            heading_exclusion=re.compile(roles['heading_exclusion'], re.IGNORECASE),
            heading_bank_words=re.compile(roles['heading_bank_words'], re.IGNORECASE),
            section_title=re.compile(sections['section_title'], re.IGNORECASE),
            toc_leader=re.compile(sections['toc_leader']),
            tab_after_heading=re.compile(sections['tab_after_heading'], re.IGNORECASE),
            section_end_markers=tuple(
                re.compile(pattern, re.IGNORECASE | re.MULTILINE)
                for pattern in sections['section_end_markers']
            ),
            extractor_stop_markers=tuple(
                re.compile(pattern, re.IGNORECASE | re.MULTILINE)
                for pattern in sections['section_end_markers'] + sections['extractor_stop_markers']
            ),
            page_furniture=tuple(re.compile(p, re.IGNORECASE) for p in sections['page_furniture']),
            entity_suffix=re.compile(banks['entity_suffix']),
            bank_start=re.compile(banks['bank_start']),
            role_prefix=re.compile(banks['role_prefix'], re.IGNORECASE),
            location_prefix=re.compile(banks['location_prefix'], re.IGNORECASE),
            nickname_suffix=re.compile(banks['nickname_suffix'], re.IGNORECASE),
            boilerplate=tuple(re.compile(p, re.IGNORECASE) for p in banks['boilerplate']),
            street_words=re.compile(banks['street_words'], re.IGNORECASE),
            noise_entities=tuple(
                # Sentence-break detection relies on case
                re.compile(p) if p.startswith('[a-z]') or p.startswith('Limited') else re.compile(p, re.IGNORECASE)
                for p in banks['noise_entities']
            ),
            company_keywords=tuple(banks['company_keywords']),
            company_exceptions=tuple(banks['company_exceptions']),
            jurisdiction_qualifiers=tuple(
                re.compile(p, re.IGNORECASE) for p in banks['jurisdiction_qualifiers']
            ),
            legal_suffix=re.compile(banks['legal_suffix']),
            leading_article=re.compile(banks['leading_article']),
            bank_aliases=tuple(
                (_alias_pattern(variation), canonical) for variation, canonical in aliases
            ),
            wrapped_bank_start=tuple(re.compile(p) for p in banks['wrapped_bank_start']),
            bank_continuation=tuple(re.compile(p) for p in banks['bank_continuation']),
            known_bank_patterns=tuple(
                re.compile(p, re.IGNORECASE) for p in cls.get_known_bank_patterns()
            ),
        )


def _alias_pattern(variation: str) -> Pattern:
    # Acronyms like "GS" or "ING" are only trusted as exact, whole words
    if len(variation) < 6:
        return re.compile(r'(?<![\w.])' + re.escape(variation) + r'(?![\w])')
    return re.compile(re.escape(variation), re.IGNORECASE)


@lru_cache(maxsize=None)
def default_rules() -> RuleSet:
    """The process-wide rule set, compiled once on first use."""
    return PatternRegistry.build_rules()
