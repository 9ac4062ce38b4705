"""ISO 15924 script codes.

Four-letter codes (title case) for the representation of names of scripts.

Reference: https://www.unicode.org/iso15924/iso15924-codes.html
"""

from ..registry import CodeRegistry


class ISO15924(CodeRegistry):
    """ISO 15924 four-letter script codes.

    Example:
        >>> ISO15924.LATN
        <ISO15924.LATN: 'Latn'>
        >>> ISO15924.includes("Cyrl")
        True
    """

    ADLM = "Adlm"  # Adlam
    AFAK = "Afak"  # Afaka
    AGHB = "Aghb"  # Caucasian Albanian
    AHOM = "Ahom"  # Ahom, Tai Ahom
    ARAB = "Arab"  # Arabic
    ARAN = "Aran"  # Arabic (Nastaliq variant)
    ARMI = "Armi"  # Imperial Aramaic
    ARMN = "Armn"  # Armenian
    AVST = "Avst"  # Avestan
    BALI = "Bali"  # Balinese
    BAMU = "Bamu"  # Bamum
    BASS = "Bass"  # Bassa Vah
    BATK = "Batk"  # Batak
    BENG = "Beng"  # Bengali (Bangla)
    BERF = "Berf"  # Beria Erfe
    BHKS = "Bhks"  # Bhaiksuki
    BLIS = "Blis"  # Blissymbols
    BOPO = "Bopo"  # Bopomofo
    BRAH = "Brah"  # Brahmi
    BRAI = "Brai"  # Braille
    BUGI = "Bugi"  # Buginese
    BUHD = "Buhd"  # Buhid
    CAKM = "Cakm"  # Chakma
    CANS = "Cans"  # Unified Canadian Aboriginal Syllabics
    CARI = "Cari"  # Carian
    CHAM = "Cham"  # Cham
    CHER = "Cher"  # Cherokee
    CHIS = "Chis"  # Chisoi
    CHRS = "Chrs"  # Chorasmian
    CIRT = "Cirt"  # Cirth
    COPT = "Copt"  # Coptic
    CPMN = "Cpmn"  # Cypro-Minoan
    CPRT = "Cprt"  # Cypriot syllabary
    CYRL = "Cyrl"  # Cyrillic
    CYRS = "Cyrs"  # Cyrillic (Old Church Slavonic variant)
    DEVA = "Deva"  # Devanagari (Nagari)
    DIAK = "Diak"  # Dives Akuru
    DOGR = "Dogr"  # Dogra
    DSRT = "Dsrt"  # Deseret (Mormon)
    DUPL = "Dupl"  # Duployan shorthand, Duployan stenography
    EGYD = "Egyd"  # Egyptian demotic
    EGYH = "Egyh"  # Egyptian hieratic
    EGYP = "Egyp"  # Egyptian hieroglyphs
    ELBA = "Elba"  # Elbasan
    ELYM = "Elym"  # Elymaic
    ETHI = "Ethi"  # Ethiopic (Geʻez)
    GARA = "Gara"  # Garay
    GEOK = "Geok"  # Khutsuri (Asomtavruli and Nuskhuri)
    GEOR = "Geor"  # Georgian (Mkhedruli and Mtavruli)
    GLAG = "Glag"  # Glagolitic
    GONG = "Gong"  # Gunjala Gondi
    GONM = "Gonm"  # Masaram Gondi
    GOTH = "Goth"  # Gothic
    GRAN = "Gran"  # Grantha
    GREK = "Grek"  # Greek
    GUJR = "Gujr"  # Gujarati
    GUKH = "Gukh"  # Gurung Khema
    GURU = "Guru"  # Gurmukhi
    HANB = "Hanb"  # Han with Bopomofo (alias for Han + Bopomofo)
    HANG = "Hang"  # Hangul (Hangŭl, Hangeul)
    HANI = "Hani"  # Han (Hanzi, Kanji, Hanja)
    HANO = "Hano"  # Hanunoo (Hanunóo)
    HANS = "Hans"  # Han (Simplified variant)
    HANT = "Hant"  # Han (Traditional variant)
    HATR = "Hatr"  # Hatran
    HEBR = "Hebr"  # Hebrew
    HIRA = "Hira"  # Hiragana
    HLUW = "Hluw"  # Anatolian Hieroglyphs (Luwian Hieroglyphs, Hittite Hieroglyphs)
    HMNG = "Hmng"  # Pahawh Hmong
    HMNP = "Hmnp"  # Nyiakeng Puachue Hmong
    HNTL = "Hntl"  # Han (Traditional variant) with Latin (alias for Hant + Latn)
    HRKT = "Hrkt"  # Japanese syllabaries (alias for Hiragana + Katakana)
    HUNG = "Hung"  # Old Hungarian (Hungarian Runic)
    INDS = "Inds"  # Indus (Harappan)
    ITAL = "Ital"  # Old Italic (Etruscan, Oscan, etc.)
    JAMO = "Jamo"  # Jamo (alias for Jamo subset of Hangul)
    JAVA = "Java"  # Javanese
    JPAN = "Jpan"  # Japanese (alias for Han + Hiragana + Katakana)
    JURC = "Jurc"  # Jurchen
    KALI = "Kali"  # Kayah Li
    KANA = "Kana"  # Katakana
    KAWI = "Kawi"  # Kawi
    KHAR = "Khar"  # Kharoshthi
    KHMR = "Khmr"  # Khmer
    KHOJ = "Khoj"  # Khojki
    KITL = "Kitl"  # Khitan large script
    KITS = "Kits"  # Khitan small script
    KNDA = "Knda"  # Kannada
    KORE = "Kore"  # Korean (alias for Hangul + Han)
    KPEL = "Kpel"  # Kpelle
    KRAI = "Krai"  # Kirat Rai
    KTHI = "Kthi"  # Kaithi
    LANA = "Lana"  # Tai Tham (Lanna)
    LAOO = "Laoo"  # Lao
    LATF = "Latf"  # Latin (Fraktur variant)
    LATG = "Latg"  # Latin (Gaelic variant)
    LATN = "Latn"  # Latin
    LEKE = "Leke"  # Leke
    LEPC = "Lepc"  # Lepcha (Róng)
    LIMB = "Limb"  # Limbu
    LINA = "Lina"  # Linear A
    LINB = "Linb"  # Linear B
    LISU = "Lisu"  # Lisu (Fraser)
    LOMA = "Loma"  # Loma
    LYCI = "Lyci"  # Lycian
    LYDI = "Lydi"  # Lydian
    MAHJ = "Mahj"  # Mahajani
    MAKA = "Maka"  # Makasar
    MAND = "Mand"  # Mandaic, Mandaean
    MANI = "Mani"  # Manichaean
    MARC = "Marc"  # Marchen
    MAYA = "Maya"  # Mayan hieroglyphs
    MEDF = "Medf"  # Medefaidrin (Oberi Okaime, Oberi Ɔkaimɛ)
    MEND = "Mend"  # Mende Kikakui
    MERC = "Merc"  # Meroitic Cursive
    MERO = "Mero"  # Meroitic Hieroglyphs
    MLYM = "Mlym"  # Malayalam
    MODI = "Modi"  # Modi, Moḍī
    MONG = "Mong"  # Mongolian
    MOON = "Moon"  # Moon (Moon code, Moon script, Moon type)
    MROO = "Mroo"  # Mro, Mru
    MTEI = "Mtei"  # Meitei Mayek (Meithei, Meetei)
    MULT = "Mult"  # Multani
    MYMR = "Mymr"  # Myanmar (Burmese)
    NAGM = "Nagm"  # Nag Mundari
    NAND = "Nand"  # Nandinagari
    NARB = "Narb"  # Old North Arabian (Ancient North Arabian)
    NBAT = "Nbat"  # Nabataean
    NEWA = "Newa"  # Newa, Newar, Newari, Nepāla lipi
    NKDB = "Nkdb"  # Naxi Dongba (na²¹ɕi³³ to³³ba²¹, Nakhi Tomba)
    NKGB = "Nkgb"  # Naxi Geba (na²¹ɕi³³ gʌ²¹ba²¹, 'Na-'Khi ²Ggŏ-¹baw, Nakhi Geba)
    NKOO = "Nkoo"  # N'Ko
    NSHU = "Nshu"  # Nüshu
    OGAM = "Ogam"  # Ogham
    OLCK = "Olck"  # Ol Chiki (Ol Cemet', Ol, Santali)
    ONAO = "Onao"  # Ol Onal
    ORKH = "Orkh"  # Old Turkic, Orkhon Runic
    ORYA = "Orya"  # Oriya (Odia)
    OSGE = "Osge"  # Osage
    OSMA = "Osma"  # Osmanya
    OUGR = "Ougr"  # Old Uyghur
    PALM = "Palm"  # Palmyrene
    PAUC = "Pauc"  # Pau Cin Hau
    PCUN = "Pcun"  # Proto-Cuneiform
    PELM = "Pelm"  # Proto-Elamite
    PERM = "Perm"  # Old Permic
    PHAG = "Phag"  # Phags-pa
    PHLI = "Phli"  # Inscriptional Pahlavi
    PHLP = "Phlp"  # Psalter Pahlavi
    PHLV = "Phlv"  # Book Pahlavi
    PHNX = "Phnx"  # Phoenician
    PLRD = "Plrd"  # Miao (Pollard)
    PIQD = "Piqd"  # Klingon (KLI pIqaD)
    PRTI = "Prti"  # Inscriptional Parthian
    PSIN = "Psin"  # Proto-Sinaitic
    QAAA = "Qaaa"  # Reserved for private use (start)
    QABX = "Qabx"  # Reserved for private use (end)
    RANJ = "Ranj"  # Ranjana
    RJNG = "Rjng"  # Rejang (Redjang, Kaganga)
    ROHG = "Rohg"  # Hanifi Rohingya
    RORO = "Roro"  # Rongorongo
    RUNR = "Runr"  # Runic
    SAMR = "Samr"  # Samaritan
    SARA = "Sara"  # Sarati
    SARB = "Sarb"  # Old South Arabian
    SAUR = "Saur"  # Saurashtra
    SEAL = "Seal"  # (Small) Seal
    SGNW = "Sgnw"  # SignWriting
    SHAW = "Shaw"  # Shavian (Shaw)
    SHRD = "Shrd"  # Sharada, Śāradā
    SHUI = "Shui"  # Shuishu
    SIDD = "Sidd"  # Siddham, Siddhaṃ, Siddhamātṛkā
    SIDT = "Sidt"  # Sidetic
    SIND = "Sind"  # Khudawadi, Sindhi
    SINH = "Sinh"  # Sinhala
    SOGD = "Sogd"  # Sogdian
    SOGO = "Sogo"  # Old Sogdian
    SORA = "Sora"  # Sora Sompeng
    SOYO = "Soyo"  # Soyombo
    SUND = "Sund"  # Sundanese
    SUNU = "Sunu"  # Sunuwar
    SYLO = "Sylo"  # Syloti Nagri
    SYRC = "Syrc"  # Syriac
    SYRE = "Syre"  # Syriac (Estrangelo variant)
    SYRJ = "Syrj"  # Syriac (Western variant)
    SYRN = "Syrn"  # Syriac (Eastern variant)
    TAGB = "Tagb"  # Tagbanwa
    TAKR = "Takr"  # Takri, Ṭākrī, Ṭāṅkrī
    TALE = "Tale"  # Tai Le
    TALU = "Talu"  # New Tai Lue
    TAML = "Taml"  # Tamil
    TANG = "Tang"  # Tangut
    TAVT = "Tavt"  # Tai Viet
    TAYO = "Tayo"  # Tai Yo
    TELU = "Telu"  # Telugu
    TENG = "Teng"  # Tengwar
    TFNG = "Tfng"  # Tifinagh (Berber)
    TGLG = "Tglg"  # Tagalog (Baybayin, Alibata)
    THAA = "Thaa"  # Thaana
    THAI = "Thai"  # Thai
    TIBT = "Tibt"  # Tibetan
    TIRH = "Tirh"  # Tirhuta
    TNSA = "Tnsa"  # Tangsa
    TODR = "Todr"  # Todhri
    TOLS = "Tols"  # Tolong Siki
    TOTO = "Toto"  # Toto
    TUTG = "Tutg"  # Tulu-Tigalari
    UGAR = "Ugar"  # Ugaritic
    VAII = "Vaii"  # Vai
    VISP = "Visp"  # Visible Speech
    VITH = "Vith"  # Vithkuqi
    WARA = "Wara"  # Warang Citi (Varang Kshiti)
    WCHO = "Wcho"  # Wancho
    WOLE = "Wole"  # Woleai
    XPEO = "Xpeo"  # Old Persian
    XSUX = "Xsux"  # Cuneiform, Sumero-Akkadian
    YEZI = "Yezi"  # Yezidi
    YIII = "Yiii"  # Yi
    ZANB = "Zanb"  # Zanabazar Square (Zanabazarin Dörböljin Useg, Xewtee Dörböljin Bicig, Horizontal Square Script)
    ZINH = "Zinh"  # Code for inherited script
    ZMTH = "Zmth"  # Mathematical notation
    ZSYE = "Zsye"  # Symbols (Emoji variant)
    ZSYM = "Zsym"  # Symbols
    ZXXX = "Zxxx"  # Code for unwritten documents
    ZYYY = "Zyyy"  # Code for undetermined script
    ZZZZ = "Zzzz"  # Code for uncoded script
