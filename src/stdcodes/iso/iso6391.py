"""ISO 639-1 language codes.

Two-letter lowercase language codes. Member names are the upper case codes
(``ISO6391.FR == "fr"``).

Reference: https://www.loc.gov/standards/iso639-2/php/code_list.php
"""

from ..registry import CodeRegistry


class ISO6391(CodeRegistry):
    """ISO 639-1 two-letter language codes."""

    AA = "aa"  # Afar
    AB = "ab"  # Abkhazian
    AE = "ae"  # Avestan
    AF = "af"  # Afrikaans
    AK = "ak"  # Akan
    AM = "am"  # Amharic
    AN = "an"  # Aragonese
    AR = "ar"  # Arabic
    AS = "as"  # Assamese
    AV = "av"  # Avaric
    AY = "ay"  # Aymara
    AZ = "az"  # Azerbaijani
    BA = "ba"  # Bashkir
    BE = "be"  # Belarusian
    BG = "bg"  # Bulgarian
    BI = "bi"  # Bislama
    BM = "bm"  # Bambara
    BN = "bn"  # Bengali
    BO = "bo"  # Tibetan
    BR = "br"  # Breton
    BS = "bs"  # Bosnian
    CA = "ca"  # Catalan; Valencian
    CE = "ce"  # Chechen
    CH = "ch"  # Chamorro
    CO = "co"  # Corsican
    CR = "cr"  # Cree
    CS = "cs"  # Czech
    CU = "cu"  # Church Slavic; Old Slavonic; Church Slavonic; Old Bulgarian; Old Church Slavonic
    CV = "cv"  # Chuvash
    CY = "cy"  # Welsh
    DA = "da"  # Danish
    DE = "de"  # German
    DV = "dv"  # Divehi; Dhivehi; Maldivian
    DZ = "dz"  # Dzongkha
    EE = "ee"  # Ewe
    EL = "el"  # Greek, Modern (1453-)
    EN = "en"  # English
    EO = "eo"  # Esperanto
    ES = "es"  # Spanish; Castilian
    ET = "et"  # Estonian
    EU = "eu"  # Basque
    FA = "fa"  # Persian
    FF = "ff"  # Fulah
    FI = "fi"  # Finnish
    FJ = "fj"  # Fijian
    FO = "fo"  # Faroese
    FR = "fr"  # French
    FY = "fy"  # Western Frisian
    GA = "ga"  # Irish
    GD = "gd"  # Gaelic; Scottish Gaelic
    GL = "gl"  # Galician
    GN = "gn"  # Guarani
    GU = "gu"  # Gujarati
    GV = "gv"  # Manx
    HA = "ha"  # Hausa
    HE = "he"  # Hebrew
    HI = "hi"  # Hindi
    HO = "ho"  # Hiri Motu
    HR = "hr"  # Croatian
    HT = "ht"  # Haitian; Haitian Creole
    HU = "hu"  # Hungarian
    HY = "hy"  # Armenian
    HZ = "hz"  # Herero
    IA = "ia"  # Interlingua (International Auxiliary Language Association)
    ID = "id"  # Indonesian
    IE = "ie"  # Interlingue; Occidental
    IG = "ig"  # Igbo
    II = "ii"  # Sichuan Yi; Nuosu
    IK = "ik"  # Inupiaq
    IO = "io"  # Ido
    IS = "is"  # Icelandic
    IT = "it"  # Italian
    IU = "iu"  # Inuktitut
    JA = "ja"  # Japanese
    JV = "jv"  # Javanese
    KA = "ka"  # Georgian
    KG = "kg"  # Kongo
    KI = "ki"  # Kikuyu; Gikuyu
    KJ = "kj"  # Kuanyama; Kwanyama
    KK = "kk"  # Kazakh
    KL = "kl"  # Kalaallisut; Greenlandic
    KM = "km"  # Central Khmer
    KN = "kn"  # Kannada
    KO = "ko"  # Korean
    KR = "kr"  # Kanuri
    KS = "ks"  # Kashmiri
    KU = "ku"  # Kurdish
    KV = "kv"  # Komi
    KW = "kw"  # Cornish
    KY = "ky"  # Kirghiz; Kyrgyz
    LA = "la"  # Latin
    LB = "lb"  # Luxembourgish; Letzeburgesch
    LG = "lg"  # Ganda
    LI = "li"  # Limburgan; Limburger; Limburgish
    LN = "ln"  # Lingala
    LO = "lo"  # Lao
    LT = "lt"  # Lithuanian
    LU = "lu"  # Luba-Katanga
    LV = "lv"  # Latvian
    MG = "mg"  # Malagasy
    MH = "mh"  # Marshallese
    MI = "mi"  # Maori
    MK = "mk"  # Macedonian
    ML = "ml"  # Malayalam
    MN = "mn"  # Mongolian
    MR = "mr"  # Marathi
    MS = "ms"  # Malay
    MT = "mt"  # Maltese
    MY = "my"  # Burmese
    NA = "na"  # Nauru
    NB = "nb"  # Bokmål, Norwegian; Norwegian Bokmål
    ND = "nd"  # Ndebele, North; North Ndebele
    NE = "ne"  # Nepali
    NG = "ng"  # Ndonga
    NL = "nl"  # Dutch; Flemish
    NN = "nn"  # Norwegian Nynorsk; Nynorsk, Norwegian
    NO = "no"  # Norwegian
    NR = "nr"  # Ndebele, South; South Ndebele
    NV = "nv"  # Navajo; Navaho
    NY = "ny"  # Chichewa; Chewa; Nyanja
    OC = "oc"  # Occitan (post 1500)
    OJ = "oj"  # Ojibwa
    OM = "om"  # Oromo
    OR = "or"  # Oriya
    OS = "os"  # Ossetian; Ossetic
    PA = "pa"  # Panjabi; Punjabi
    PI = "pi"  # Pali
    PL = "pl"  # Polish
    PS = "ps"  # Pushto; Pashto
    PT = "pt"  # Portuguese
    QU = "qu"  # Quechua
    RM = "rm"  # Romansh
    RN = "rn"  # Rundi
    RO = "ro"  # Romanian; Moldavian; Moldovan
    RU = "ru"  # Russian
    RW = "rw"  # Kinyarwanda
    SA = "sa"  # Sanskrit
    SC = "sc"  # Sardinian
    SD = "sd"  # Sindhi
    SE = "se"  # Northern Sami
    SG = "sg"  # Sango
    SI = "si"  # Sinhala; Sinhalese
    SK = "sk"  # Slovak
    SL = "sl"  # Slovenian
    SM = "sm"  # Samoan
    SN = "sn"  # Shona
    SO = "so"  # Somali
    SQ = "sq"  # Albanian
    SR = "sr"  # Serbian
    SS = "ss"  # Swati
    ST = "st"  # Sotho, Southern
    SU = "su"  # Sundanese
    SV = "sv"  # Swedish
    SW = "sw"  # Swahili
    TA = "ta"  # Tamil
    TE = "te"  # Telugu
    TG = "tg"  # Tajik
    TH = "th"  # Thai
    TI = "ti"  # Tigrinya
    TK = "tk"  # Turkmen
    TL = "tl"  # Tagalog
    TN = "tn"  # Tswana
    TO = "to"  # Tonga (Tonga Islands)
    TR = "tr"  # Turkish
    TS = "ts"  # Tsonga
    TT = "tt"  # Tatar
    TW = "tw"  # Twi
    TY = "ty"  # Tahitian
    UG = "ug"  # Uighur; Uyghur
    UK = "uk"  # Ukrainian
    UR = "ur"  # Urdu
    UZ = "uz"  # Uzbek
    VE = "ve"  # Venda
    VI = "vi"  # Vietnamese
    VO = "vo"  # Volapük
    WA = "wa"  # Walloon
    WO = "wo"  # Wolof
    XH = "xh"  # Xhosa
    YI = "yi"  # Yiddish
    YO = "yo"  # Yoruba
    ZA = "za"  # Zhuang; Chuang
    ZH = "zh"  # Chinese
    ZU = "zu"  # Zulu
