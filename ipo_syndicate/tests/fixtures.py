"""
Regression fixtures: one text per layout seen in real prospectuses.
"""

TAB_LAYOUT = """DIRECTORS AND PARTIES INVOLVED IN THE GLOBAL OFFERING
Sole Sponsor\tDeutsche Securities Asia Limited
\t52/F, International Commerce Centre
\t1 Austin Road West
\tKowloon, Hong Kong
Joint Global Coordinators\tDeutsche Securities Asia Limited
\t(in alphabetical order)
\tMorgan Stanley Asia Limited
\t46/F, International Commerce Centre
\t1 Austin Road West
\tKowloon, Hong Kong
Joint Bookrunners\tDeutsche Securities Asia Limited
\tMorgan Stanley Asia Limited
\tHaitong International Securities Company Limited
\t22/F, Li Po Chun Chambers
\t189 Des Voeux Road Central
\tHong Kong
Legal Advisers to the Company\tAs to Hong Kong law:
\tFreshfields Bruckhaus Deringer
"""

LINE_BREAK_LAYOUT = """PARTIES INVOLVED IN THE GLOBAL OFFERING
Joint Sponsors
China International Capital Corporation
Hong Kong Securities Limited
29/F, One International Finance Centre
1 Harbour View Street
Central, Hong Kong
Goldman Sachs (Asia) L.L.C.
68/F, Cheung Kong Center
2 Queen's Road Central
Hong Kong
Joint Global Coordinators, Joint Bookrunners
and Joint Lead Managers
China International Capital Corporation
Hong Kong Securities Limited
Goldman Sachs (Asia) L.L.C.
The Hongkong and Shanghai Banking Corporation Limited
1 Queen's Road Central
Hong Kong
Co-lead Managers
ABCI Capital Limited
Futu Securities International (Hong Kong) Limited
Legal Advisers to the Company
As to Hong Kong law
"""

COMPOUND_HEADINGS = """PARTIES INVOLVED IN THE GLOBAL OFFERING
Sponsor and Overall Coordinator
CICC Limited
29/F, One International Finance Centre
1 Harbour View Street
Central, Hong Kong
Joint Bookrunners and Joint Lead Managers
CMB International Capital Limited
45/F, Champion Tower
3 Garden Road
Central, Hong Kong
Huatai Financial Holdings (Hong Kong) Limited
62/F, The Center
99 Queen's Road Central
Hong Kong
Auditor
"""

LOST_TABS = """PARTIES INVOLVED IN THE GLOBAL OFFERING
Sole Sponsor CICC Limited
29/F, One International Finance Centre
1 Harbour View Street
Central, Hong Kong
Joint Bookrunners Morgan Stanley Asia Limited
46/F, International Commerce Centre
CICC Limited
Reporting Accountant
"""

DIRECTORS_PREFIX = """DIRECTORS AND PARTIES INVOLVED IN THE GLOBAL OFFERING
DIRECTORS
Name\tAddress\tNationality
Executive Directors
Mr. Zhang Wei\tRoom 1201, Block 3\tChinese
Ms. Li Na\tFlat 8B, Tower 2\tChinese
PARTIES INVOLVED IN THE GLOBAL OFFERING
Joint Sponsors\tHuatai Financial Holdings (Hong Kong) Limited
\t62/F, The Center
\t99 Queen's Road Central
\tHong Kong
\tCCB International Capital Limited
\t12/F, CCB Tower
\t3 Connaught Road Central
\tCentral, Hong Kong
Joint Global Coordinators\tHuatai Financial Holdings (Hong Kong) Limited
\tCCB International Capital Limited
Receiving Bank\tBank of China (Hong Kong) Limited
\t1 Garden Road
\tHong Kong
CORPORATE INFORMATION
"""

TRANCHE_RESTATEMENT = """PARTIES INVOLVED IN THE GLOBAL OFFERING
Sole Sponsor\tCICC Limited
\t29/F, One International Finance Centre
\t1 Harbour View Street
\tCentral, Hong Kong
Hong Kong Underwriters\tChina International Capital Corporation Hong Kong Securities Limited
\tGuotai Junan Securities (Hong Kong) Limited
\t27/F, Low Block, Grand Millennium Plaza
\t181 Queen's Road Central
\tHong Kong
Property Valuer
"""

UNTABLED_UNDERWRITERS = """PARTIES INVOLVED IN THE GLOBAL OFFERING
Sole Sponsor
CICC Limited
Hong Kong Public Offering Underwriters
Morgan Stanley Asia Limited
Joint Underwriters
Haitong International Securities Company Limited
Auditor
"""

FUSED_KEYWORD_HEADING = """PARTIES INVOLVED IN THE GLOBAL OFFERING
Joint Bookrunners
Morgan Stanley Asia Limited
Joint Sponsors, Overall Coordinators and Capital Market Intermediaries CICC Limited
29/F, One International Finance Centre
Auditor
"""

NO_BANKS = """PARTIES INVOLVED IN THE GLOBAL OFFERING
Sole Sponsor\tTo be announced
"""

TOC_ENTRY = "Parties Involved in the Offering ........... 42"

TOC_PAGE = """CONTENTS
Expected Timetable .......................... 1
Summary ..................................... 3
Directors and Parties Involved in the Global Offering .......... 65
Corporate Information ....................... 72
"""

FILLER = (
    "The Global Offering is conditional on the Listing Committee granting the listing of, "
    "and permission to deal in, the Shares in issue and to be issued as described herein. "
) * 25

CROSS_REFERENCE = (
    "For further details, see the section headed “Directors and Parties Involved in the "
    "Global Offering” in this prospectus.\n" + FILLER + "\n"
)


def full_document(section: str = TAB_LAYOUT) -> tuple:
    """Pages of a prospectus: table of contents, a cross reference, then the section."""
    return (TOC_PAGE, CROSS_REFERENCE, section)
