"""Country dialing codes.

``CountryCode`` is a closed enumeration: every member carries exactly one
dial code and adding a country means adding a member here.
"""

from enum import Enum


class CountryCode(Enum):
    """
    Country identifiers with their international dialing prefixes.

    Each member's value is a ``(tag, dial_code, country_name)`` tuple. The tag
    keeps members distinct even when two countries share a dial code.

    Usage Example:
        assert CountryCode.USA.dial_code == "+1"
        assert str(CountryCode.UK) == "+44"
    """

    USA = ("USA", "+1", "United States")
    UK = ("UK", "+44", "United Kingdom")
    IND = ("IND", "+91", "India")
    INA = ("INA", "+62", "Indonesia")
    CHN = ("CHN", "+86", "China")
    JPN = ("JPN", "+81", "Japan")
    KOR = ("KOR", "+82", "South Korea")
    DEU = ("DEU", "+49", "Germany")
    RUS = ("RUS", "+7", "Russia")
    FRA = ("FRA", "+33", "France")
    ITA = ("ITA", "+39", "Italy")
    ESP = ("ESP", "+34", "Spain")
    AUS = ("AUS", "+61", "Australia")
    SGP = ("SGP", "+65", "Singapore")
    ARG = ("ARG", "+54", "Argentina")
    BRA = ("BRA", "+55", "Brazil")
    CHL = ("CHL", "+56", "Chile")
    COL = ("COL", "+57", "Colombia")
    VEN = ("VEN", "+58", "Venezuela")
    MYS = ("MYS", "+60", "Malaysia")
    PHL = ("PHL", "+63", "Philippines")
    NZL = ("NZL", "+64", "New Zealand")
    THA = ("THA", "+66", "Thailand")
    VNM = ("VNM", "+84", "Vietnam")
    TUR = ("TUR", "+90", "Turkey")
    PAK = ("PAK", "+92", "Pakistan")
    AFG = ("AFG", "+93", "Afghanistan")
    LKA = ("LKA", "+94", "Sri Lanka")
    MMR = ("MMR", "+95", "Myanmar (Burma)")
    IRN = ("IRN", "+98", "Iran")
    MAR = ("MAR", "+212", "Morocco")
    DZA = ("DZA", "+213", "Algeria")
    TUN = ("TUN", "+216", "Tunisia")
    LBY = ("LBY", "+218", "Libya")
    GMB = ("GMB", "+220", "Gambia")
    SEN = ("SEN", "+221", "Senegal")
    MRT = ("MRT", "+222", "Mauritania")
    MLI = ("MLI", "+223", "Mali")
    GIN = ("GIN", "+224", "Guinea")
    CIV = ("CIV", "+225", "Ivory Coast (Côte d'Ivoire)")
    BFA = ("BFA", "+226", "Burkina Faso")
    NER = ("NER", "+227", "Niger")
    TGO = ("TGO", "+228", "Togo")
    BEN = ("BEN", "+229", "Benin")
    MUS = ("MUS", "+230", "Mauritius")
    LBR = ("LBR", "+231", "Liberia")
    SLE = ("SLE", "+232", "Sierra Leone")
    GHA = ("GHA", "+233", "Ghana")
    NGA = ("NGA", "+234", "Nigeria")
    TCD = ("TCD", "+235", "Chad")
    CAF = ("CAF", "+236", "Central African Republic")
    CMR = ("CMR", "+237", "Cameroon")
    CPV = ("CPV", "+238", "Cape Verde")
    STP = ("STP", "+239", "São Tomé and Príncipe")
    GNQ = ("GNQ", "+240", "Equatorial Guinea")
    GAB = ("GAB", "+241", "Gabon")
    COG = ("COG", "+242", "Congo-Brazzaville")
    COD = ("COD", "+243", "Democratic Republic of the Congo")
    AGO = ("AGO", "+244", "Angola")
    GNB = ("GNB", "+245", "Guinea-Bissau")
    IOT = ("IOT", "+246", "British Indian Ocean Territory")
    SHN = ("SHN", "+247", "Saint Helena, Ascension and Tristan da Cunha")
    SYC = ("SYC", "+248", "Seychelles")
    SDN = ("SDN", "+249", "Sudan")
    RWA = ("RWA", "+250", "Rwanda")
    ETH = ("ETH", "+251", "Ethiopia")
    SOM = ("SOM", "+252", "Somalia")
    DJI = ("DJI", "+253", "Djibouti")
    KEN = ("KEN", "+254", "Kenya")
    TZA = ("TZA", "+255", "Tanzania")
    UGA = ("UGA", "+256", "Uganda")
    BDI = ("BDI", "+257", "Burundi")
    MOZ = ("MOZ", "+258", "Mozambique")
    ZMB = ("ZMB", "+260", "Zambia")
    MDG = ("MDG", "+261", "Madagascar")
    REU = ("REU", "+262", "Réunion")
    ZWE = ("ZWE", "+263", "Zimbabwe")
    NAM = ("NAM", "+264", "Namibia")
    MWI = ("MWI", "+265", "Malawi")
    LSO = ("LSO", "+266", "Lesotho")
    BWA = ("BWA", "+267", "Botswana")
    SWZ = ("SWZ", "+268", "Eswatini (Swaziland)")
    COM = ("COM", "+269", "Comoros")
    ERI = ("ERI", "+291", "Eritrea")
    ABW = ("ABW", "+297", "Aruba")
    FRO = ("FRO", "+298", "Faroe Islands")
    GRL = ("GRL", "+299", "Greenland")
    GIB = ("GIB", "+350", "Gibraltar")
    PRT = ("PRT", "+351", "Portugal")
    LUX = ("LUX", "+352", "Luxembourg")
    IRL = ("IRL", "+353", "Ireland")
    ISL = ("ISL", "+354", "Iceland")
    ALB = ("ALB", "+355", "Albania")
    MLT = ("MLT", "+356", "Malta")
    CYP = ("CYP", "+357", "Cyprus")
    FIN = ("FIN", "+358", "Finland")
    BGR = ("BGR", "+359", "Bulgaria")
    LTU = ("LTU", "+370", "Lithuania")
    LVA = ("LVA", "+371", "Latvia")
    EST = ("EST", "+372", "Estonia")
    MDA = ("MDA", "+373", "Moldova")
    ARM = ("ARM", "+374", "Armenia")
    BLR = ("BLR", "+375", "Belarus")
    AND = ("AND", "+376", "Andorra")
    MCO = ("MCO", "+377", "Monaco")
    SMR = ("SMR", "+378", "San Marino")
    VAT = ("VAT", "+379", "Vatican City")
    UKR = ("UKR", "+380", "Ukraine")
    SRB = ("SRB", "+381", "Serbia")
    MNE = ("MNE", "+382", "Montenegro")
    HRV = ("HRV", "+385", "Croatia")
    SVN = ("SVN", "+386", "Slovenia")
    BIH = ("BIH", "+387", "Bosnia and Herzegovina")
    MKD = ("MKD", "+389", "North Macedonia")
    CZE = ("CZE", "+420", "Czechia (Czech Republic)")
    SVK = ("SVK", "+421", "Slovakia")
    LIE = ("LIE", "+423", "Liechtenstein")
    FLK = ("FLK", "+500", "Falkland Islands")
    BLZ = ("BLZ", "+501", "Belize")
    GTM = ("GTM", "+502", "Guatemala")
    SLV = ("SLV", "+503", "El Salvador")
    HND = ("HND", "+504", "Honduras")
    NIC = ("NIC", "+505", "Nicaragua")
    CRI = ("CRI", "+506", "Costa Rica")
    PAN = ("PAN", "+507", "Panama")
    SPM = ("SPM", "+508", "Saint Pierre and Miquelon")
    HTI = ("HTI", "+509", "Haiti")
    GLP = ("GLP", "+590", "Guadeloupe")
    BOL = ("BOL", "+591", "Bolivia")
    GUY = ("GUY", "+592", "Guyana")
    ECU = ("ECU", "+593", "Ecuador")
    MYT = ("MYT", "+594", "Mayotte")
    PRY = ("PRY", "+595", "Paraguay")
    MTQ = ("MTQ", "+596", "Martinique")
    SUR = ("SUR", "+597", "Suriname")
    URY = ("URY", "+598", "Uruguay")
    ANT = ("ANT", "+599", "Caribbean Netherlands")
    TLS = ("TLS", "+670", "Timor-Leste (East Timor)")
    ATA = ("ATA", "+672", "Antarctica")
    BRN = ("BRN", "+673", "Brunei")
    NRU = ("NRU", "+674", "Nauru")
    PNG = ("PNG", "+675", "Papua New Guinea")
    TON = ("TON", "+676", "Tonga")
    SLB = ("SLB", "+677", "Solomon Islands")
    VUT = ("VUT", "+678", "Vanuatu")
    FJI = ("FJI", "+679", "Fiji")
    PLW = ("PLW", "+680", "Palau")
    WLF = ("WLF", "+681", "Wallis and Futuna")
    COK = ("COK", "+682", "Cook Islands")
    NIU = ("NIU", "+683", "Niue")
    WSM = ("WSM", "+685", "Samoa")
    KIR = ("KIR", "+686", "Kiribati")
    NCL = ("NCL", "+687", "New Caledonia")
    TUV = ("TUV", "+688", "Tuvalu")
    PYF = ("PYF", "+689", "French Polynesia")
    TKL = ("TKL", "+690", "Tokelau")
    FSM = ("FSM", "+691", "Federated States of Micronesia")
    MHL = ("MHL", "+692", "Marshall Islands")
    PRK = ("PRK", "+850", "North Korea")
    HKG = ("HKG", "+852", "Hong Kong")
    MAC = ("MAC", "+853", "Macao")
    KHM = ("KHM", "+855", "Cambodia")
    LAO = ("LAO", "+856", "Laos")
    BGD = ("BGD", "+880", "Bangladesh")
    TWN = ("TWN", "+886", "Taiwan")
    MDV = ("MDV", "+960", "Maldives")
    LBN = ("LBN", "+961", "Lebanon")
    JOR = ("JOR", "+962", "Jordan")
    SYR = ("SYR", "+963", "Syria")
    IRQ = ("IRQ", "+964", "Iraq")
    KWT = ("KWT", "+965", "Kuwait")
    SAU = ("SAU", "+966", "Saudi Arabia")
    YEM = ("YEM", "+967", "Yemen")
    OMN = ("OMN", "+968", "Oman")
    PSE = ("PSE", "+970", "Palestine")
    ARE = ("ARE", "+971", "United Arab Emirates")
    ISR = ("ISR", "+972", "Israel")
    BHR = ("BHR", "+973", "Bahrain")
    QAT = ("QAT", "+974", "Qatar")
    BTN = ("BTN", "+975", "Bhutan")
    MNG = ("MNG", "+976", "Mongolia")
    NPL = ("NPL", "+977", "Nepal")
    TJK = ("TJK", "+992", "Tajikistan")
    TKM = ("TKM", "+993", "Turkmenistan")
    AZE = ("AZE", "+994", "Azerbaijan")
    GEO = ("GEO", "+995", "Georgia")
    KGZ = ("KGZ", "+996", "Kyrgyzstan")
    UZB = ("UZB", "+998", "Uzbekistan")

    def __init__(self, tag: str, dial_code: str, country_name: str):
        self.tag = tag
        self._dial_code = dial_code
        self.country_name = country_name

    @property
    def dial_code(self) -> str:
        """Dialing prefix, a ``+`` followed by one to three digits."""
        return self._dial_code

    @classmethod
    def from_name(cls, tag: str) -> "CountryCode | None":
        """Look a member up by its tag, ignoring case."""
        if not tag or not isinstance(tag, str):
            return None
        return cls.__members__.get(tag.strip().upper())

    @classmethod
    def all(cls) -> list["CountryCode"]:
        """Get every supported country."""
        return list(cls)

    def __str__(self) -> str:
        return self._dial_code

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}.{self.name}: {self._dial_code!r}>"


def dial_code(country: CountryCode) -> str:
    """Render ``country`` as its canonical ``+<digits>`` prefix."""
    return country.dial_code


__all__ = ["CountryCode", "dial_code"]
