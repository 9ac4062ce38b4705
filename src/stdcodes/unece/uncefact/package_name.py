"""UN/CEFACT package type names."""

from __future__ import annotations

from ...registry import CodeRegistry


class PackageName(CodeRegistry):
    """Package type names, member for member with ``PackageCode``."""

    BAG = "Bag"
    BAR = "Bar"
    BARREL = "Barrel"
    BASKET = "Basket"
    BIN = "Bin"
    BOARD = "Board"
    BOX = "Box"
    BUNCH = "Bunch"
    BUNDLE = "Bundle"
    CAGE = "Cage"
    CAN_RECTANGULAR = "Can, rectangular"
    CAN_CYLINDRICAL = "Can, cylindrical"
    CAN_WITH_HANDLE_AND_SPOUT = "Can, with handle and spout"
    CARBOY_NON_PROTECTED = "Carboy, non-protected"
    CARBOY_PROTECTED = "Carboy, protected"
    CARD = "Card"
    CARTON = "Carton"
    CARTRIDGE = "Cartridge"
    CASE = "Case"
    CASE_ISOTHERMIC = "Case, isothermic"
    CASE_SKELETON = "Case, skeleton"
    CASE_STEEL = "Case, steel"
    CASE_WITH_PALLET_BASE = "Case, with pallet base"
    CASE_WITH_PALLET_BASE_CARDBOARD = "Case, with pallet base, cardboard"
    CASE_WITH_PALLET_BASE_METAL = "Case, with pallet base, metal"
    CASE_WITH_PALLET_BASE_PLASTIC = "Case, with pallet base, plastic"
    CASE_WITH_PALLET_BASE_WOODEN = "Case, with pallet base, wooden"
    CASK = "Cask"
    CHEST = "Chest"
    CHURN = "Churn"
    CLOTHING_RACK = "Rack, clothing hanger"
    COIL = "Coil"
    COVER = "Cover"
    CRATE = "Crate"
    CRATE_BEER = "Crate, beer"
    CRATE_BULK_CARDBOARD = "Crate, bulk, cardboard"
    CRATE_BULK_PLASTIC = "Crate, bulk, plastic"
    CRATE_BULK_WOODEN = "Crate, bulk, wooden"
    CRATE_FRAMED = "Crate, framed"
    CRATE_FRUIT = "Crate, fruit"
    CRATE_MILK = "Crate, milk"
    CRATE_MULTIPLE_LAYER_CARDBOARD = "Crate, multiple layer, cardboard"
    CRATE_MULTIPLE_LAYER_PLASTIC = "Crate, multiple layer, plastic"
    CRATE_MULTIPLE_LAYER_WOODEN = "Crate, multiple layer, wooden"
    CRATE_SHALLOW = "Crate, shallow"
    CREEL = "Creel"
    CUP = "Cup"
    CYLINDRICAL_TANK = "Tank, cylindrical"
    DRUM = "Drum"
    DRUM_ALUMINIUM = "Drum, aluminium"
    DRUM_ALUMINIUM_NON_REMOVABLE_HEAD = "Drum, aluminium, non-removable head"
    DRUM_ALUMINIUM_REMOVABLE_HEAD = "Drum, aluminium, removable head"
    DRUM_FIBRE = "Drum, fibre"
    DRUM_IRON = "Drum, iron"
    DRUM_PLASTIC = "Drum, plastic"
    DRUM_PLASTIC_NON_REMOVABLE_HEAD = "Drum, plastic, non-removable head"
    DRUM_PLASTIC_REMOVABLE_HEAD = "Drum, plastic, removable head"
    DRUM_PLYWOOD = "Drum, plywood"
    DRUM_STEEL = "Drum, steel"
    DRUM_WOODEN = "Drum, wooden"
    DRUM_STEEL_NON_REMOVABLE_HEAD = "Drum, steel, non-removable head"
    DRUM_STEEL_REMOVABLE_HEAD = "Drum, steel, removable head"
    ENVELOPE = "Envelope"
    ENVELOPE_STEEL = "Envelope, steel"
    FILM_PACK = "Filmpack"
    FIRKIN = "Firkin"
    FRAME = "Frame"
    GIRDER = "Girder"
    GIRDERS = "Girders, in bundle/bunch/truss"
    JAR = "Jar"
    LOG = "Log"
    LOGS = "Logs, in bundle/bunch/truss"
    MATCH_BOX = "Match Box"
    NEST = "Nest"
    NOT_AVAILABLE = "Not available"
    PACKAGE = "Package"
    PAIL = "Pail"
    PARCEL = "Parcel"
    PALLET = "Pallet"
    PALLET_BOX = "Pallet, box"
    PALLET_80x60 = "Pallet, modular, collars 80cms * 60cms"
    PALLET_80x100 = "Pallet, modular, collars 80cms * 100cms"
    PALLET_80x120 = "Pallet, modular, collars 80cms * 120cms"
    PALLET_SHRINK_WRAPPED = "Pallet, shrink, wrapped"
    PIPE = "Pipe"
    PITCHER = "Pitcher"
    PLANK = "Plank"
    PLANKS = "Planks, in bundle/bunch/truss"
    PLATE = "Plate"
    PLATES = "Plates, in bundle/bunch/truss"
    POT = "Pot"
    POUCH = "Pouch"
    RACK = "Rack"
    RECTANGULAR_TANK = "Tank, rectangular"
    ROLL = "Roll"
    ROD = "Rod"
    RODS = "Rods, in bundle/bunch/truss"
    SACHET = "Sachet"
    SET = "Set"
    SHEET = "Sheet"
    SHEET_METAL = "Sheetmetal"
    SHEET_PLASTIC_WRAPPING = "Sheet, plastic wrapping"
    SHEETS = "Sheets, in bundle/bunch/truss"
    SHRINK_WRAPPED = "Shrinkwrapped"
    SLAB = "Slab"
    TIN = "Tin"
    TRAY = "Tray"
    VAT = "Vat"

    @classmethod
    def get_code(cls, name: str) -> str | None:
        """Return the package code of a package name, or None."""
        from .package_code import PackageCode

        return cls._lookup_paired(PackageCode, name)

    @classmethod
    def get_from_code(cls, code: str) -> str | None:
        from .package_code import PackageCode

        return PackageCode.get_name(code)
