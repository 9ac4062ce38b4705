"""UN M49 country and area codes.

Countries and areas of the UN Standard Country or Area Codes for Statistical
Use (M49), identified by their ISO alpha-3 code.

Reference: https://unstats.un.org/unsd/methodology/m49/
"""

from ..registry import CodeRegistry


class UNM49(CodeRegistry):
    """UN M49 countries and areas, keyed and valued by ISO alpha-3 code."""

    AFG = "AFG"  # Afghanistan
    ALA = "ALA"  # Åland Islands
    ALB = "ALB"  # Albania
    DZA = "DZA"  # Algeria
    ASM = "ASM"  # American Samoa
    AND = "AND"  # Andorra
    AGO = "AGO"  # Angola
    AIA = "AIA"  # Anguilla
    ATA = "ATA"  # Antarctica
    ATG = "ATG"  # Antigua and Barbuda
    ARG = "ARG"  # Argentina
    ARM = "ARM"  # Armenia
    ABW = "ABW"  # Aruba
    AUS = "AUS"  # Australia
    AUT = "AUT"  # Austria
    AZE = "AZE"  # Azerbaijan
    BHS = "BHS"  # Bahamas
    BHR = "BHR"  # Bahrain
    BGD = "BGD"  # Bangladesh
    BRB = "BRB"  # Barbados
    BLR = "BLR"  # Belarus
    BEL = "BEL"  # Belgium
    BLZ = "BLZ"  # Belize
    BEN = "BEN"  # Benin
    BMU = "BMU"  # Bermuda
    BTN = "BTN"  # Bhutan
    BOL = "BOL"  # Bolivia (Plurinational State of)
    BES = "BES"  # Bonaire, Sint Eustatius and Saba
    BIH = "BIH"  # Bosnia and Herzegovina
    BWA = "BWA"  # Botswana
    BVT = "BVT"  # Bouvet Island
    BRA = "BRA"  # Brazil
    IOT = "IOT"  # British Indian Ocean Territory
    VGB = "VGB"  # British Virgin Islands
    BRN = "BRN"  # Brunei Darussalam
    BGR = "BGR"  # Bulgaria
    BFA = "BFA"  # Burkina Faso
    BDI = "BDI"  # Burundi
    CPV = "CPV"  # Cabo Verde
    KHM = "KHM"  # Cambodia
    CMR = "CMR"  # Cameroon
    CAN = "CAN"  # Canada
    CYM = "CYM"  # Cayman Islands
    CAF = "CAF"  # Central African Republic
    TCD = "TCD"  # Chad
    CHL = "CHL"  # Chile
    CHN = "CHN"  # China
    HKG = "HKG"  # China, Hong Kong Special Administrative Region
    MAC = "MAC"  # China, Macao Special Administrative Region
    CXR = "CXR"  # Christmas Island
    CCK = "CCK"  # Cocos (Keeling) Islands
    COL = "COL"  # Colombia
    COM = "COM"  # Comoros
    COG = "COG"  # Congo
    COK = "COK"  # Cook Islands
    CRI = "CRI"  # Costa Rica
    CIV = "CIV"  # Côte d'Ivoire
    HRV = "HRV"  # Croatia
    CUB = "CUB"  # Cuba
    CUW = "CUW"  # Curaçao
    CYP = "CYP"  # Cyprus
    CZE = "CZE"  # Czechia
    PRK = "PRK"  # Democratic People's Republic of Korea
    COD = "COD"  # Democratic Republic of the Congo
    DNK = "DNK"  # Denmark
    DJI = "DJI"  # Djibouti
    DMA = "DMA"  # Dominica
    DOM = "DOM"  # Dominican Republic
    ECU = "ECU"  # Ecuador
    EGY = "EGY"  # Egypt
    SLV = "SLV"  # El Salvador
    GNQ = "GNQ"  # Equatorial Guinea
    ERI = "ERI"  # Eritrea
    EST = "EST"  # Estonia
    SWZ = "SWZ"  # Eswatini
    ETH = "ETH"  # Ethiopia
    FLK = "FLK"  # Falkland Islands (Malvinas)
    FRO = "FRO"  # Faroe Islands
    FJI = "FJI"  # Fiji
    FIN = "FIN"  # Finland
    FRA = "FRA"  # France
    GUF = "GUF"  # French Guiana
    PYF = "PYF"  # French Polynesia
    ATF = "ATF"  # French Southern Territories
    GAB = "GAB"  # Gabon
    GMB = "GMB"  # Gambia
    GEO = "GEO"  # Georgia
    DEU = "DEU"  # Germany
    GHA = "GHA"  # Ghana
    GIB = "GIB"  # Gibraltar
    GRC = "GRC"  # Greece
    GRL = "GRL"  # Greenland
    GRD = "GRD"  # Grenada
    GLP = "GLP"  # Guadeloupe
    GUM = "GUM"  # Guam
    GTM = "GTM"  # Guatemala
    GGY = "GGY"  # Guernsey
    GIN = "GIN"  # Guinea
    GNB = "GNB"  # Guinea-Bissau
    GUY = "GUY"  # Guyana
    HTI = "HTI"  # Haiti
    HMD = "HMD"  # Heard Island and McDonald Islands
    VAT = "VAT"  # Holy See
    HND = "HND"  # Honduras
    HUN = "HUN"  # Hungary
    ISL = "ISL"  # Iceland
    IND = "IND"  # India
    IDN = "IDN"  # Indonesia
    IRN = "IRN"  # Iran (Islamic Republic of)
    IRQ = "IRQ"  # Iraq
    IRL = "IRL"  # Ireland
    IMN = "IMN"  # Isle of Man
    ISR = "ISR"  # Israel
    ITA = "ITA"  # Italy
    JAM = "JAM"  # Jamaica
    JPN = "JPN"  # Japan
    JEY = "JEY"  # Jersey
    JOR = "JOR"  # Jordan
    KAZ = "KAZ"  # Kazakhstan
    KEN = "KEN"  # Kenya
    KIR = "KIR"  # Kiribati
    KWT = "KWT"  # Kuwait
    KGZ = "KGZ"  # Kyrgyzstan
    LAO = "LAO"  # Lao People's Democratic Republic
    LVA = "LVA"  # Latvia
    LBN = "LBN"  # Lebanon
    LSO = "LSO"  # Lesotho
    LBR = "LBR"  # Liberia
    LBY = "LBY"  # Libya
    LIE = "LIE"  # Liechtenstein
    LTU = "LTU"  # Lithuania
    LUX = "LUX"  # Luxembourg
    MDG = "MDG"  # Madagascar
    MWI = "MWI"  # Malawi
    MYS = "MYS"  # Malaysia
    MDV = "MDV"  # Maldives
    MLI = "MLI"  # Mali
    MLT = "MLT"  # Malta
    MHL = "MHL"  # Marshall Islands
    MTQ = "MTQ"  # Martinique
    MRT = "MRT"  # Mauritania
    MUS = "MUS"  # Mauritius
    MYT = "MYT"  # Mayotte
    MEX = "MEX"  # Mexico
    FSM = "FSM"  # Micronesia (Federated States of)
    MCO = "MCO"  # Monaco
    MNG = "MNG"  # Mongolia
    MNE = "MNE"  # Montenegro
    MSR = "MSR"  # Montserrat
    MAR = "MAR"  # Morocco
    MOZ = "MOZ"  # Mozambique
    MMR = "MMR"  # Myanmar
    NAM = "NAM"  # Namibia
    NRU = "NRU"  # Nauru
    NPL = "NPL"  # Nepal
    NLD = "NLD"  # Netherlands (Kingdom of the)
    NCL = "NCL"  # New Caledonia
    NZL = "NZL"  # New Zealand
    NIC = "NIC"  # Nicaragua
    NER = "NER"  # Niger
    NGA = "NGA"  # Nigeria
    NIU = "NIU"  # Niue
    NFK = "NFK"  # Norfolk Island
    MKD = "MKD"  # North Macedonia
    MNP = "MNP"  # Northern Mariana Islands
    NOR = "NOR"  # Norway
    OMN = "OMN"  # Oman
    PAK = "PAK"  # Pakistan
    PLW = "PLW"  # Palau
    PAN = "PAN"  # Panama
    PNG = "PNG"  # Papua New Guinea
    PRY = "PRY"  # Paraguay
    PER = "PER"  # Peru
    PHL = "PHL"  # Philippines
    PCN = "PCN"  # Pitcairn
    POL = "POL"  # Poland
    PRT = "PRT"  # Portugal
    PRI = "PRI"  # Puerto Rico
    QAT = "QAT"  # Qatar
    KOR = "KOR"  # Republic of Korea
    MDA = "MDA"  # Republic of Moldova
    REU = "REU"  # Réunion
    ROU = "ROU"  # Romania
    RUS = "RUS"  # Russian Federation
    RWA = "RWA"  # Rwanda
    BLM = "BLM"  # Saint Barthélemy
    SHN = "SHN"  # Saint Helena
    KNA = "KNA"  # Saint Kitts and Nevis
    LCA = "LCA"  # Saint Lucia
    MAF = "MAF"  # Saint Martin (French Part)
    SPM = "SPM"  # Saint Pierre and Miquelon
    VCT = "VCT"  # Saint Vincent and the Grenadines
    WSM = "WSM"  # Samoa
    SMR = "SMR"  # San Marino
    STP = "STP"  # Sao Tome and Principe
    SAU = "SAU"  # Saudi Arabia
    SEN = "SEN"  # Senegal
    SRB = "SRB"  # Serbia
    SYC = "SYC"  # Seychelles
    SLE = "SLE"  # Sierra Leone
    SGP = "SGP"  # Singapore
    SXM = "SXM"  # Sint Maarten (Dutch part)
    SVK = "SVK"  # Slovakia
    SVN = "SVN"  # Slovenia
    SLB = "SLB"  # Solomon Islands
    SOM = "SOM"  # Somalia
    ZAF = "ZAF"  # South Africa
    SGS = "SGS"  # South Georgia and the South Sandwich Islands
    SSD = "SSD"  # South Sudan
    ESP = "ESP"  # Spain
    LKA = "LKA"  # Sri Lanka
    PSE = "PSE"  # State of Palestine
    SDN = "SDN"  # Sudan
    SUR = "SUR"  # Suriname
    SJM = "SJM"  # Svalbard and Jan Mayen Islands
    SWE = "SWE"  # Sweden
    CHE = "CHE"  # Switzerland
    SYR = "SYR"  # Syrian Arab Republic
    TJK = "TJK"  # Tajikistan
    THA = "THA"  # Thailand
    TLS = "TLS"  # Timor-Leste
    TGO = "TGO"  # Togo
    TKL = "TKL"  # Tokelau
    TON = "TON"  # Tonga
    TTO = "TTO"  # Trinidad and Tobago
    TUN = "TUN"  # Tunisia
    TUR = "TUR"  # Türkiye
    TKM = "TKM"  # Turkmenistan
    TCA = "TCA"  # Turks and Caicos Islands
    TUV = "TUV"  # Tuvalu
    UGA = "UGA"  # Uganda
    UKR = "UKR"  # Ukraine
    ARE = "ARE"  # United Arab Emirates
    GBR = "GBR"  # United Kingdom of Great Britain and Northern Ireland
    TZA = "TZA"  # United Republic of Tanzania
    UMI = "UMI"  # United States Minor Outlying Islands
    USA = "USA"  # United States of America
    VIR = "VIR"  # United States Virgin Islands
    URY = "URY"  # Uruguay
    UZB = "UZB"  # Uzbekistan
    VUT = "VUT"  # Vanuatu
    VEN = "VEN"  # Venezuela (Bolivarian Republic of)
    VNM = "VNM"  # Viet Nam
    WLF = "WLF"  # Wallis and Futuna Islands
    ESH = "ESH"  # Western Sahara
    YEM = "YEM"  # Yemen
    ZMB = "ZMB"  # Zambia
    ZWE = "ZWE"  # Zimbabwe
