from .currency import Currency


# Major fiat currencies
USD = Currency.from_iso("USD")
EUR = Currency.from_iso("EUR")
GBP = Currency.from_iso("GBP")
CHF = Currency.from_iso("CHF")
CAD = Currency.from_iso("CAD")
AUD = Currency.from_iso("AUD")

# Zero-decimal currencies
JPY = Currency.from_iso("JPY")
KRW = Currency.from_iso("KRW")

# Three-decimal currencies
KWD = Currency.from_iso("KWD")
BHD = Currency.from_iso("BHD")
