"""Known brand names with documented misspellings."""

from __future__ import annotations

from lotwise.domain.model import KnownBrand

KNOWN_BRANDS: tuple[KnownBrand, ...] = (
    # Swiss watches
    KnownBrand("Lemania", ("Lemonia", "Lemaina", "Lemenia"), "watches", 0.95),
    KnownBrand("Omega", ("Omaga", "Omege"), "watches", 0.95),
    KnownBrand("Rolex", ("Rollex", "Roleex"), "watches", 0.95),
    KnownBrand("Patek Philippe", ("Pateck Philippe", "Patek Philip"), "watches", 0.95),
    KnownBrand("Vacheron Constantin", ("Vacheron Konstatin",), "watches", 0.95),
    # Scandinavian glass
    KnownBrand("Orrefors", ("Orefors", "Orrefross"), "glass", 0.90),
    KnownBrand("Kosta Boda", ("Kosta", "Kostaboda"), "glass", 0.90),
    KnownBrand("Iittala", ("Itala", "Iitala"), "glass", 0.90),
    KnownBrand("Nuutajärvi", ("Nuutajarvi", "Nutajarvi"), "glass", 0.85),
    # Scandinavian ceramics
    KnownBrand("Gustavsberg", ("Gustavberg", "Gustavsber"), "ceramics", 0.90),
    KnownBrand("Rörstrand", ("Rorstrand", "Rörstran"), "ceramics", 0.90),
    KnownBrand("Arabia", ("Arabie", "Aravia"), "ceramics", 0.90),
    KnownBrand("Royal Copenhagen", ("Royal Kopenhagen", "Rojal Copenhagen"), "ceramics", 0.95),
    KnownBrand("Bing & Grøndahl", ("Bing Grondahl", "Bing Gröndahl"), "ceramics", 0.90),
    # Furniture and design
    KnownBrand("Svenskt Tenn", ("Svensk Tenn", "Svenskttenn"), "furniture", 0.85),
    KnownBrand("Källemo", ("Kallemo", "Kälemo"), "furniture", 0.85),
    KnownBrand("Lammhults", ("Lamhults", "Lammmhults"), "furniture", 0.85),
    # International luxury
    KnownBrand("Hermès", ("Hermes", "Hermés"), "luxury", 0.95),
    KnownBrand("Louis Vuitton", ("Louis Vitton", "Luis Vuitton"), "luxury", 0.95),
    KnownBrand("Cartier", ("Cartie",), "luxury", 0.95),
)

_CATEGORY_HINTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("watches", ("lemania", "omega", "rolex", "patek")),
    ("glass", ("orrefors", "iittala", "kosta")),
    ("ceramics", ("gustavsberg", "royal copenhagen", "arabia")),
    ("furniture", ("svenskt tenn", "källemo")),
)


def infer_category(brand_name: str, brands: tuple[KnownBrand, ...] = KNOWN_BRANDS) -> str:
    name = brand_name.casefold()
    for brand in brands:
        if brand.name.casefold() == name:
            return brand.category
    for category, hints in _CATEGORY_HINTS:
        if any(hint in name for hint in hints):
            return category
    return "unknown"
