"""ISO 4217 currency and ISO 18245 merchant category lookup tables."""
from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

# numeric code -> (alpha code, display name)
CURRENCIES: Final[Mapping[str, tuple[str, str]]] = MappingProxyType(
    {
        "012": ("DZD", "Algerian Dinar"),
        "032": ("ARS", "Argentine Peso"),
        "036": ("AUD", "Australian Dollar"),
        "044": ("BSD", "Bahamian Dollar"),
        "048": ("BHD", "Bahraini Dinar"),
        "050": ("BDT", "Bangladeshi Taka"),
        "051": ("AMD", "Armenian Dram"),
        "052": ("BBD", "Barbadian Dollar"),
        "060": ("BMD", "Bermudian Dollar"),
        "064": ("BTN", "Bhutanese Ngultrum"),
        "068": ("BOB", "Bolivian Boliviano"),
        "072": ("BWP", "Botswana Pula"),
        "084": ("BZD", "Belize Dollar"),
        "090": ("SBD", "Solomon Islands Dollar"),
        "096": ("BND", "Brunei Dollar"),
        "104": ("MMK", "Myanmar Kyat"),
        "108": ("BIF", "Burundian Franc"),
        "116": ("KHR", "Cambodian Riel"),
        "124": ("CAD", "Canadian Dollar"),
        "132": ("CVE", "Cape Verdean Escudo"),
        "136": ("KYD", "Cayman Islands Dollar"),
        "144": ("LKR", "Sri Lankan Rupee"),
        "152": ("CLP", "Chilean Peso"),
        "156": ("CNY", "Chinese Yuan"),
        "170": ("COP", "Colombian Peso"),
        "174": ("KMF", "Comorian Franc"),
        "188": ("CRC", "Costa Rican Colón"),
        "191": ("HRK", "Croatian Kuna"),
        "192": ("CUP", "Cuban Peso"),
        "203": ("CZK", "Czech Koruna"),
        "208": ("DKK", "Danish Krone"),
        "214": ("DOP", "Dominican Peso"),
        "222": ("SVC", "Salvadoran Colón"),
        "230": ("ETB", "Ethiopian Birr"),
        "232": ("ERN", "Eritrean Nakfa"),
        "238": ("FKP", "Falkland Islands Pound"),
        "242": ("FJD", "Fijian Dollar"),
        "262": ("DJF", "Djiboutian Franc"),
        "270": ("GMD", "Gambian Dalasi"),
        "292": ("GIP", "Gibraltar Pound"),
        "320": ("GTQ", "Guatemalan Quetzal"),
        "324": ("GNF", "Guinean Franc"),
        "328": ("GYD", "Guyanese Dollar"),
        "332": ("HTG", "Haitian Gourde"),
        "340": ("HNL", "Honduran Lempira"),
        "344": ("HKD", "Hong Kong Dollar"),
        "348": ("HUF", "Hungarian Forint"),
        "352": ("ISK", "Icelandic Króna"),
        "356": ("INR", "Indian Rupee"),
        "360": ("IDR", "Indonesian Rupiah"),
        "364": ("IRR", "Iranian Rial"),
        "368": ("IQD", "Iraqi Dinar"),
        "376": ("ILS", "Israeli New Shekel"),
        "388": ("JMD", "Jamaican Dollar"),
        "392": ("JPY", "Japanese Yen"),
        "398": ("KZT", "Kazakhstani Tenge"),
        "400": ("JOD", "Jordanian Dinar"),
        "404": ("KES", "Kenyan Shilling"),
        "408": ("KPW", "North Korean Won"),
        "410": ("KRW", "South Korean Won"),
        "414": ("KWD", "Kuwaiti Dinar"),
        "417": ("KGS", "Kyrgyzstani Som"),
        "418": ("LAK", "Lao Kip"),
        "422": ("LBP", "Lebanese Pound"),
        "426": ("LSL", "Lesotho Loti"),
        "430": ("LRD", "Liberian Dollar"),
        "434": ("LYD", "Libyan Dinar"),
        "446": ("MOP", "Macanese Pataca"),
        "454": ("MWK", "Malawian Kwacha"),
        "458": ("MYR", "Malaysian Ringgit"),
        "462": ("MVR", "Maldivian Rufiyaa"),
        "480": ("MUR", "Mauritian Rupee"),
        "484": ("MXN", "Mexican Peso"),
        "496": ("MNT", "Mongolian Tögrög"),
        "498": ("MDL", "Moldovan Leu"),
        "504": ("MAD", "Moroccan Dirham"),
        "512": ("OMR", "Omani Rial"),
        "516": ("NAD", "Namibian Dollar"),
        "524": ("NPR", "Nepalese Rupee"),
        "532": ("ANG", "Netherlands Antillean Guilder"),
        "533": ("AWG", "Aruban Florin"),
        "548": ("VUV", "Vanuatu Vatu"),
        "554": ("NZD", "New Zealand Dollar"),
        "558": ("NIO", "Nicaraguan Córdoba"),
        "566": ("NGN", "Nigerian Naira"),
        "578": ("NOK", "Norwegian Krone"),
        "586": ("PKR", "Pakistani Rupee"),
        "590": ("PAB", "Panamanian Balboa"),
        "598": ("PGK", "Papua New Guinean Kina"),
        "600": ("PYG", "Paraguayan Guaraní"),
        "604": ("PEN", "Peruvian Sol"),
        "608": ("PHP", "Philippine Peso"),
        "634": ("QAR", "Qatari Riyal"),
        "643": ("RUB", "Russian Ruble"),
        "646": ("RWF", "Rwandan Franc"),
        "654": ("SHP", "Saint Helena Pound"),
        "682": ("SAR", "Saudi Riyal"),
        "690": ("SCR", "Seychellois Rupee"),
        "694": ("SLL", "Sierra Leonean Leone"),
        "702": ("SGD", "Singapore Dollar"),
        "704": ("VND", "Vietnamese Dong"),
        "706": ("SOS", "Somali Shilling"),
        "710": ("ZAR", "South African Rand"),
        "728": ("SSP", "South Sudanese Pound"),
        "748": ("SZL", "Swazi Lilangeni"),
        "752": ("SEK", "Swedish Krona"),
        "756": ("CHF", "Swiss Franc"),
        "760": ("SYP", "Syrian Pound"),
        "764": ("THB", "Thai Baht"),
        "776": ("TOP", "Tongan Paʻanga"),
        "780": ("TTD", "Trinidad and Tobago Dollar"),
        "784": ("AED", "UAE Dirham"),
        "788": ("TND", "Tunisian Dinar"),
        "800": ("UGX", "Ugandan Shilling"),
        "807": ("MKD", "Macedonian Denar"),
        "818": ("EGP", "Egyptian Pound"),
        "826": ("GBP", "British Pound"),
        "834": ("TZS", "Tanzanian Shilling"),
        "840": ("USD", "US Dollar"),
        "858": ("UYU", "Uruguayan Peso"),
        "860": ("UZS", "Uzbekistani Som"),
        "882": ("WST", "Samoan Tālā"),
        "886": ("YER", "Yemeni Rial"),
        "901": ("TWD", "New Taiwan Dollar"),
        "925": ("SLE", "Sierra Leonean Leone"),
        "926": ("VED", "Venezuelan Bolívar Digital"),
        "928": ("VES", "Venezuelan Bolívar Soberano"),
        "929": ("MRU", "Mauritanian Ouguiya"),
        "930": ("STN", "São Tomé and Príncipe Dobra"),
        "931": ("CUC", "Cuban Convertible Peso"),
        "932": ("ZWL", "Zimbabwean Dollar"),
        "933": ("BYN", "Belarusian Ruble"),
        "934": ("TMT", "Turkmenistani Manat"),
        "936": ("GHS", "Ghanaian Cedi"),
        "938": ("SDG", "Sudanese Pound"),
        "940": ("UYI", "Uruguayan Peso"),
        "941": ("RSD", "Serbian Dinar"),
        "943": ("MZN", "Mozambican Metical"),
        "944": ("AZN", "Azerbaijani Manat"),
        "946": ("RON", "Romanian Leu"),
        "947": ("CHW", "Swiss Franc WIR"),
        "948": ("CHE", "Euro WIR"),
        "949": ("TRY", "Turkish Lira"),
        "950": ("XAF", "Central African CFA Franc"),
        "951": ("XCD", "East Caribbean Dollar"),
        "952": ("XOF", "West African CFA Franc"),
        "953": ("XPF", "CFP Franc"),
        "960": ("XDR", "Special Drawing Rights"),
        "965": ("XUA", "ADB Unit of Account"),
        "967": ("ZMW", "Zambian Kwacha"),
        "968": ("SRD", "Surinamese Dollar"),
        "969": ("MGA", "Malagasy Ariary"),
        "971": ("AFN", "Afghan Afghani"),
        "972": ("TJS", "Tajikistani Somoni"),
        "973": ("AOA", "Angolan Kwanza"),
        "975": ("BGN", "Bulgarian Lev"),
        "976": ("CDF", "Congolese Franc"),
        "977": ("BAM", "Bosnian Convertible Mark"),
        "978": ("EUR", "Euro"),
        "979": ("MXV", "Mexican Unidad de Inversion"),
        "980": ("UAH", "Ukrainian Hryvnia"),
        "981": ("GEL", "Georgian Lari"),
        "984": ("BOV", "Bolivian Mvdol"),
        "985": ("PLN", "Polish Złoty"),
        "986": ("BRL", "Brazilian Real"),
        "990": ("CLF", "Chilean Unidad de Fomento"),
        "997": ("USN", "US Dollar (Next day)"),
        "999": ("XXX", "No currency"),
    }
)

MERCHANT_CATEGORIES: Final[Mapping[str, str]] = MappingProxyType(
    {
        # Transportation
        "4121": "Taxicabs and Limousines",
        "4511": "Airlines",
        "4722": "Travel Agencies and Tour Operators",
        "4789": "Transportation Services",
        # Retail
        "5399": "Miscellaneous General Merchandise",
        "5411": "Grocery Stores, Supermarkets",
        "5541": "Service Stations",
        "5812": "Eating Places, Restaurants",
        "5814": "Fast Food Restaurants",
        "5912": "Drug Stores and Pharmacies",
        "5999": "Other Services",
        # Financial
        "6011": "Financial Institutions - Automated Cash Disbursements",
        "6012": "Financial Institutions - Merchants",
        "6051": "Money Transfer",
        # Lodging and professional
        "7011": "Lodging - Hotels, Motels, Resorts",
        "7512": "Car Rental Agencies",
        "8011": "Doctors",
        "8062": "Hospitals",
    }
)


def describe_currency(code: str) -> str:
    """Return ``"<name> (<alpha>)"`` for an ISO 4217 numeric code."""

    entry = CURRENCIES.get(code)
    if entry is None:
        return f"Unknown Currency ({code})"
    alpha, name = entry
    return f"{name} ({alpha})"


def currency_alpha(code: str) -> str | None:
    entry = CURRENCIES.get(code)
    return entry[0] if entry else None


def describe_merchant_category(code: str) -> str:
    return MERCHANT_CATEGORIES.get(code, "Unknown Category")
