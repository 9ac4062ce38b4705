"""UN/CEFACT package type codes (Recommendation 21).

Two-character codes describing how goods are packed for transport
(bags, drums, pallets, ...). ``PackageName`` declares the matching names.

Reference: https://unece.org/trade/uncefact/cl-recommendations
"""

from __future__ import annotations

from ...registry import CodeRegistry


class PackageCode(CodeRegistry):
    """UN/CEFACT Recommendation 21 package type codes.

    Example:
        >>> PackageCode.get_name("BG")
        'Bag'
        >>> PackageCode.get_from_name("Pallet")
        'PX'
    """

    # A flexible container made of paper, plastic, or woven material, used for holding various goods.
    BAG = "BG"
    # A general term for a long, rigid piece of material, often wood or metal, used for structural support or as a flat
    # surface.
    BAR = "BR"
    # A rigid, cylindrical container, typically larger than a drum, used for bulk liquids or solids.
    BARREL = "BA"
    # A container typically made of interwoven material (like wicker or plastic strips), often with handles, used for
    # carrying or storing items.
    BASKET = "BK"
    # A large, rigid container, often cylindrical or rectangular, used for bulk storage of loose materials like grain or
    # waste.
    BIN = "BI"
    # A flat, usually rectangular piece of stiff material (wood, cardboard, plastic) used as a base or cover, or for
    # structural support.
    BOARD = "BD"
    # A box is a general term for a container, typically rigid, with flat sides and often a lid. The material can vary
    # widely.
    BOX = "BX"
    # A group of items typically bound together; a bunch or bundle.
    BUNCH = "BH"
    # A collection of items or packages fastened or wrapped together; a packet.
    BUNDLE = "BE"
    # A large protective enclosure, typically made of bars or mesh, used for transporting or storing animals or fragile
    # goods.
    CAGE = "CG"
    # A container designed for liquids, typically rectangular, with a relatively small volume.
    CAN_RECTANGULAR = "CA"
    # A container designed for liquids, typically cylindrical, with a relatively small volume.
    CAN_CYLINDRICAL = "CX"
    # A cylindrical or rectangular container with a handle and a spout, designed for pouring liquids.
    CAN_WITH_HANDLE_AND_SPOUT = "CD"
    # A large, narrow-necked bottle without external protection.
    CARBOY_NON_PROTECTED = "CO"
    # A large, narrow-necked bottle with external protection, often in a crate.
    CARBOY_PROTECTED = "CP"
    # A flat piece of paperboard or plastic used as a backing or for display packaging, often for individual items.
    CARD = "CM"
    # A folding box made from corrugated or solid fibreboard, commonly used for packaging.
    CARTON = "CT"
    # Cartridge. Code: CQ, Numeric code: 92 [30, 40]
    CARTRIDGE = "CQ"
    # A container, often made of wood or heavy cardboard, used for packing goods; typically stronger than a box.
    CASE = "CS"
    # A type of case designed to maintain a consistent temperature for its contents.
    CASE_ISOTHERMIC = "EI"
    # A container, often made of wood, consisting only of a framework without solid sides, allowing contents to be
    # visible.
    CASE_SKELETON = "SK"
    # A case made of steel.
    CASE_STEEL = "SS"
    # A case that incorporates a pallet base for easier handling with forklifts.
    CASE_WITH_PALLET_BASE = "ED"
    # A case with a pallet base, made of cardboard.
    CASE_WITH_PALLET_BASE_CARDBOARD = "EF"
    # A case with a pallet base, made of metal.
    CASE_WITH_PALLET_BASE_METAL = "EH"
    # A case with a pallet base, made of plastic.
    CASE_WITH_PALLET_BASE_PLASTIC = "EG"
    # A case with a pallet base, made of wood.
    CASE_WITH_PALLET_BASE_WOODEN = "EE"
    # A large, sturdy wooden barrel or keg, often used for alcoholic beverages like wine or spirits.
    CASK = "CK"
    # A sturdy container, often rectangular and made of wood or metal, used for storage or transport of valuables.
    CHEST = "CH"
    # A cylindrical container, typically made of wood or metal, used for transporting milk or other liquids.
    CHURN = "CC"
    # A rack specifically designed for hanging clothes.
    CLOTHING_RACK = "RJ"
    # A wound length of wire, rope, or other flexible material, often in a spiral shape.
    COIL = "CL"
    # A protective lid or cover, often temporary, placed over a container or item.
    COVER = "CV"
    # A strong, open box or container, usually made of wooden slats, used for transporting fragile or heavy goods.
    CRATE = "CR"
    # A type of crate specifically designed for transporting beer bottles or cans.
    CRATE_BEER = "CB"
    # A bulk crate made primarily of cardboard, for large quantities of goods.
    CRATE_BULK_CARDBOARD = "DK"
    # A bulk crate made primarily of plastic, for large quantities of goods.
    CRATE_BULK_PLASTIC = "DL"
    # A bulk crate made primarily of wood, for large quantities of goods.
    CRATE_BULK_WOODEN = "DM"
    # A crate reinforced with a frame, offering additional structural integrity.
    CRATE_FRAMED = "FD"
    # A crate specifically designed for transporting fruits.
    CRATE_FRUIT = "FC"
    # A crate specifically designed for transporting milk bottles or cartons.
    CRATE_MILK = "MC"
    # A cardboard crate designed with multiple layers for organized packing.
    CRATE_MULTIPLE_LAYER_CARDBOARD = "DC"
    # A plastic crate designed with multiple layers for organized packing.
    CRATE_MULTIPLE_LAYER_PLASTIC = "DA"
    # A wooden crate designed with multiple layers for organized packing.
    CRATE_MULTIPLE_LAYER_WOODEN = "DB"
    # A shallow crate, often used for produce or smaller items.
    CRATE_SHALLOW = "SC"
    # A traditional container made from wicker or interwoven wood strips, often conical, used for carrying fish.
    CREEL = "CE"
    # A small open-topped container, typically for drinking, often with a handle.
    CUP = "CU"
    # A large, cylindrical container, often metallic, used for storing or transporting liquids or gases in bulk.
    CYLINDRICAL_TANK = "TY"
    # A large cylindrical container, typically made of metal, plastic, or fibreboard, used for bulk liquids or powders.
    DRUM = "DR"
    # A drum made of aluminium.
    DRUM_ALUMINIUM = "1B"
    # A drum made of aluminium with a non-removable head.
    DRUM_ALUMINIUM_NON_REMOVABLE_HEAD = "QC"
    # A drum made of aluminium with a removable head.
    DRUM_ALUMINIUM_REMOVABLE_HEAD = "QD"
    # A drum made of fibreboard.
    DRUM_FIBRE = "1G"
    # A drum made of iron.
    DRUM_IRON = "DI"
    # A drum made of plastic.
    DRUM_PLASTIC = "IH"
    # A drum made of plastic with a non-removable head.
    DRUM_PLASTIC_NON_REMOVABLE_HEAD = "QF"
    # A drum made of plastic with a removable head.
    DRUM_PLASTIC_REMOVABLE_HEAD = "QG"
    # A drum made of plywood.
    DRUM_PLYWOOD = "1D"
    # A drum made of steel.
    DRUM_STEEL = "1A"
    # A drum made of steel with a non-removable head.
    DRUM_STEEL_NON_REMOVABLE_HEAD = "QA"
    # A drum made of steel with a removable head.
    DRUM_STEEL_REMOVABLE_HEAD = "QB"
    # A drum made of wood.
    DRUM_WOODEN = "1W"
    # A thin, flat paper or plastic container used for mailing letters or documents.
    ENVELOPE = "EN"
    # A steel thin, flat paper or plastic container used for mailing letters or documents.
    ENVELOPE_STEEL = "SV"
    # A small, cylindrical wooden barrel, traditionally used for beer or butter.
    FIRKIN = "FI"
    # A pack of photographic film.
    FILM_PACK = "FP"
    # A structural support or framework, often made of wood or metal, used to give shape or stability.
    FRAME = "FR"
    # A large, heavy, typically horizontal structural beam or support.
    GIRDER = "GI"
    # Multiple girders, typically bound together for transport or storage.
    GIRDERS = "GZ"
    # A container used for storing or transporting liquids or gases in bulk.
    JAR = "JR"
    # A single trunk or large branch of a tree after being cut, typically for timber.
    LOG = "LG"
    # Multiple logs, typically bound together for transport or storage.
    LOGS = "LZ"
    # A small rectangular box, typically made of cardboard, for holding matches.
    MATCH_BOX = "MX"
    # A set of containers that fit one inside the other, or a group of items housed together.
    NEST = "NS"
    # Indicates that the packaging type is not available, not specified, or not applicable.
    NOT_AVAILABLE = "NA"
    # A wrapped package, usually of small to medium size, prepared for mailing or shipping.
    PACKAGE = "PK"
    # A cylindrical container, typically metal, with a carrying handle, used for liquids like paint or chemicals.
    PAIL = "PL"
    # A wrapped package, usually of small to medium size, prepared for mailing or shipping. Note: 'PA' is also used for
    # "Packet" in some contexts.
    PARCEL = "PA"
    # A flat transport structure, often made of wood, used to consolidate goods into a unit load for handling by
    # forklifts.
    PALLET = "PX"
    # A type of container that combines a pallet base with a box-like superstructure, often collapsible or detachable.
    PALLET_BOX = "PB"
    # A specific size of pallet, 80cm x 60cm.
    PALLET_80x60 = "AF"
    # A specific size of pallet, 80cm x 100cm.
    PALLET_80x100 = "PD"
    # A specific size of pallet, 80cm x 120cm, often known as an Euro pallet.
    PALLET_80x120 = "PE"
    # A pallet shrink, wrapped
    PALLET_SHRINK_WRAPPED = "AG"
    # A hollow cylindrical structure, often used for conveying liquids or gases.
    PIPE = "PI"
    # A container, typically with a handle and a spout, used for pouring liquids.
    PITCHER = "PH"
    # A flat, elongated piece of timber or metal, thicker than a board, used for flooring or construction.
    PLANK = "PN"
    # Multiple planks, typically bound together.
    PLANKS = "PZ"
    # A Transport plate.
    PLATE = "PG"
    # A set of transport plate.
    PLATES = "PY"
    # A small bag or flexible container, often sealed, used for holding small items or portions of products.
    POUCH = "PO"
    # A container used for storing or transporting liquids or gases in bulk.
    POT = "PT"
    # A framework with shelves, hooks, or bars for holding or displaying items.
    RACK = "RK"
    # A large, rectangular container, often metallic, used for storing or transporting liquids or gases in bulk.
    RECTANGULAR_TANK = "TK"
    # A cylindrical object formed by winding a flexible material, or the material itself in this form.
    ROLL = "RO"
    # A thin, straight bar or stick, often metal.
    ROD = "RD"
    # Multiple rods, typically bound together.
    RODS = "RZ"
    # A small bag or pouch, often heat-sealed, used for single servings or small quantities.
    SACHET = "SH"
    # A collection or group of distinct items or packages considered as a unit.
    SET = "SM"
    # A single, flat, thin piece of material, often paper, plastic, or fabric.
    SHEET = "ST"
    # A single, flat piece of metal in sheet form.
    SHEET_METAL = "Sheetmetal"
    # Sheet, plastic wrapping
    SHEET_PLASTIC_WRAPPING = "SP"
    # Multiple sheets, typically bound together for transport or storage.
    SHEETS = "SZ"
    # Items or packages wrapped tightly in a thin plastic film that shrinks when heat is applied.
    SHRINK_WRAPPED = "SW"
    # A thick, flat piece of a solid material. It's a very versatile word, commonly used in various contexts.
    SLAB = "SB"
    # A tin (or tin can in American English) specifically refers to a container made of tinplate, which is steel coated
    # with a thin layer of tin. This coating provides corrosion resistance and allows for easy soldering.
    TIN = "TN"
    # A small, rectangular container, often metallic, used for storing or transporting liquids or gases in bulk.
    TRAY = "PU"
    # A vat is a large container used for holding, mixing, or storing liquids or other substances, especially in
    # industrial or commercial processes.
    VAT = "VA"

    @classmethod
    def get_from_name(cls, name: str) -> str | None:
        """Return the package code for a package name, or None."""
        from .package_name import PackageName

        return PackageName.get_code(name)

    @classmethod
    def get_name(cls, code: str) -> str | None:
        """Return the package name for a package code, or None."""
        from .package_name import PackageName

        return cls._lookup_paired(PackageName, code)
