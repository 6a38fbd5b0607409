"""
iso.py — Static ISO 4217 metadata.

Plain data: code -> (symbol, name, minor unit, numeric code).
Only the lookup lives here; Currency.from_iso() turns an entry into a
Currency. The table is a snapshot supplied to the engine, not computed by it.
"""

from __future__ import annotations

from typing import NamedTuple


class IsoEntry(NamedTuple):
    symbol: str
    name: str
    minor_unit: int
    numeric_code: int


ISO_4217: dict[str, IsoEntry] = {
    # Americas
    "USD": IsoEntry("$", "United States dollar", 2, 840),
    "CAD": IsoEntry("CA$", "Canadian dollar", 2, 124),
    "MXN": IsoEntry("MX$", "Mexican peso", 2, 484),
    "BRL": IsoEntry("R$", "Brazilian real", 2, 986),
    "ARS": IsoEntry("AR$", "Argentine peso", 2, 32),
    "CLP": IsoEntry("CLP$", "Chilean peso", 0, 152),
    "COP": IsoEntry("COL$", "Colombian peso", 2, 170),
    "PEN": IsoEntry("S/", "Peruvian sol", 2, 604),
    # Europe
    "EUR": IsoEntry("€", "Euro", 2, 978),
    "GBP": IsoEntry("£", "Pound sterling", 2, 826),
    "CHF": IsoEntry("CHF", "Swiss franc", 2, 756),
    "SEK": IsoEntry("kr", "Swedish krona", 2, 752),
    "NOK": IsoEntry("kr", "Norwegian krone", 2, 578),
    "DKK": IsoEntry("kr.", "Danish krone", 2, 208),
    "ISK": IsoEntry("kr", "Icelandic króna", 0, 352),
    "PLN": IsoEntry("zł", "Polish złoty", 2, 985),
    "CZK": IsoEntry("Kč", "Czech koruna", 2, 203),
    "HUF": IsoEntry("Ft", "Hungarian forint", 2, 348),
    "RON": IsoEntry("lei", "Romanian leu", 2, 946),
    "TRY": IsoEntry("₺", "Turkish lira", 2, 949),
    "UAH": IsoEntry("₴", "Ukrainian hryvnia", 2, 980),
    # Asia / Pacific
    "JPY": IsoEntry("¥", "Japanese yen", 0, 392),
    "CNY": IsoEntry("CN¥", "Renminbi", 2, 156),
    "HKD": IsoEntry("HK$", "Hong Kong dollar", 2, 344),
    "TWD": IsoEntry("NT$", "New Taiwan dollar", 2, 901),
    "KRW": IsoEntry("₩", "South Korean won", 0, 410),
    "SGD": IsoEntry("S$", "Singapore dollar", 2, 702),
    "INR": IsoEntry("₹", "Indian rupee", 2, 356),
    "IDR": IsoEntry("Rp", "Indonesian rupiah", 2, 360),
    "MYR": IsoEntry("RM", "Malaysian ringgit", 2, 458),
    "THB": IsoEntry("฿", "Thai baht", 2, 764),
    "PHP": IsoEntry("₱", "Philippine peso", 2, 608),
    "VND": IsoEntry("₫", "Vietnamese đồng", 0, 704),
    "AUD": IsoEntry("A$", "Australian dollar", 2, 36),
    "NZD": IsoEntry("NZ$", "New Zealand dollar", 2, 554),
    # Middle East / Africa
    "AED": IsoEntry("د.إ", "United Arab Emirates dirham", 2, 784),
    "SAR": IsoEntry("﷼", "Saudi riyal", 2, 682),
    "ILS": IsoEntry("₪", "Israeli new shekel", 2, 376),
    "KWD": IsoEntry("د.ك", "Kuwaiti dinar", 3, 414),
    "BHD": IsoEntry(".د.ب", "Bahraini dinar", 3, 48),
    "OMR": IsoEntry("ر.ع.", "Omani rial", 3, 512),
    "JOD": IsoEntry("د.ا", "Jordanian dinar", 3, 400),
    "TND": IsoEntry("د.ت", "Tunisian dinar", 3, 788),
    "EGP": IsoEntry("E£", "Egyptian pound", 2, 818),
    "ZAR": IsoEntry("R", "South African rand", 2, 710),
    "NGN": IsoEntry("₦", "Nigerian naira", 2, 566),
    "KES": IsoEntry("KSh", "Kenyan shilling", 2, 404),
    "UGX": IsoEntry("USh", "Ugandan shilling", 0, 800),
    "XAF": IsoEntry("FCFA", "Central African CFA franc", 0, 950),
    "XOF": IsoEntry("F CFA", "West African CFA franc", 0, 952),
}


def lookup(code: str) -> IsoEntry | None:
    """Return the ISO entry for an (already upper-cased) code, or None."""
    return ISO_4217.get(code)


def is_iso(code: str) -> bool:
    return code.upper() in ISO_4217
