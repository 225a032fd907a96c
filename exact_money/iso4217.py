"""
Built-in ISO 4217 currencies.

Official and active ISO 4217 currencies as of August 29, 2018
(https://www.currency-iso.org/en/home/tables/table-a1.html), without the entity
column and its duplicates. The symbol columns are NOT part of ISO 4217, they are
collected from https://wikipedia.org and similar sources.

A decimal places value of None marks currencies without a smallest unit.
"""

from typing import List

from exact_money.currency import ISO4217Currency

# fmt: off
ISO4217_TABLE: List[ISO4217Currency] = [
    ISO4217Currency("AFN", 971, "Afghani", 2, "؋"),
    ISO4217Currency("EUR", 978, "Euro", 2, "€"),
    ISO4217Currency("ALL", 8, "Lek", 2, "L"),
    ISO4217Currency("DZD", 12, "Algerian Dinar", 2, "DA"),
    ISO4217Currency("USD", 840, "US Dollar", 2, "US$", "$"),
    ISO4217Currency("AOA", 973, "Kwanza", 2, "Kz"),
    ISO4217Currency("XCD", 951, "East Caribbean Dollar", 2, "EC$", "$"),
    ISO4217Currency("ARS", 32, "Argentine Peso", 2, "$"),
    ISO4217Currency("AMD", 51, "Armenian Dram", 2, "֏"),
    ISO4217Currency("AWG", 533, "Aruban Florin", 2, "ƒ"),
    ISO4217Currency("AUD", 36, "Australian Dollar", 2, "AU$", "$"),
    ISO4217Currency("AZN", 944, "Azerbaijan Manat", 2, "₼"),
    ISO4217Currency("BSD", 44, "Bahamian Dollar", 2, "B$", "$"),
    ISO4217Currency("BHD", 48, "Bahraini Dinar", 3, "BD"),
    ISO4217Currency("BDT", 50, "Taka", 2, "৳"),
    ISO4217Currency("BBD", 52, "Barbados Dollar", 2, "Bds$", "$"),
    ISO4217Currency("BYN", 933, "Belarusian Ruble", 2, "Br"),
    ISO4217Currency("BZD", 84, "Belize Dollar", 2, "BZ$", "$"),
    ISO4217Currency("XOF", 952, "CFA Franc BCEAO", 0, "CFA", "Fr"),
    ISO4217Currency("BMD", 60, "Bermudian Dollar", 2, "BD$", "$"),
    ISO4217Currency("INR", 356, "Indian Rupee", 2, "₹"),
    ISO4217Currency("BTN", 64, "Ngultrum", 2, "Nu."),
    ISO4217Currency("BOB", 68, "Boliviano", 2, "Bs."),
    ISO4217Currency("BOV", 984, "Mvdol", 2),
    ISO4217Currency("BAM", 977, "Convertible Mark", 2, "KM"),
    ISO4217Currency("BWP", 72, "Pula", 2, "P"),
    ISO4217Currency("NOK", 578, "Norwegian Krone", 2, "kr"),
    ISO4217Currency("BRL", 986, "Brazilian Real", 2, "R$"),
    ISO4217Currency("BND", 96, "Brunei Dollar", 2, "B$", "$"),
    ISO4217Currency("BGN", 975, "Bulgarian Lev", 2, "лв."),
    ISO4217Currency("BIF", 108, "Burundi Franc", 0, "FBu"),
    ISO4217Currency("CVE", 132, "Cabo Verde Escudo", 2, "Esc"),
    ISO4217Currency("KHR", 116, "Riel", 2, "៛"),
    ISO4217Currency("XAF", 950, "CFA Franc BEAC", 0, "CFA", "Fr"),
    ISO4217Currency("CAD", 124, "Canadian Dollar", 2, "CA$", "$"),
    ISO4217Currency("KYD", 136, "Cayman Islands Dollar", 2, "KY$"),
    ISO4217Currency("CLP", 152, "Chilean Peso", 0, "CLP$", "$"),
    ISO4217Currency("CLF", 990, "Unidad de Fomento", 4),
    ISO4217Currency("CNY", 156, "Yuan Renminbi", 2, "¥"),
    ISO4217Currency("COP", 170, "Colombian Peso", 2, "Col$", "$"),
    ISO4217Currency("COU", 970, "Unidad de Valor Real", 2),
    ISO4217Currency("KMF", 174, "Comorian Franc", 0, "CF", "Fr"),
    ISO4217Currency("CDF", 976, "Congolese Franc", 2, "F"),
    ISO4217Currency("NZD", 554, "New Zealand Dollar", 2, "NZ$", "$"),
    ISO4217Currency("CRC", 188, "Costa Rican Colon", 2, "₡"),
    ISO4217Currency("HRK", 191, "Kuna", 2, "kn"),
    ISO4217Currency("CUP", 192, "Cuban Peso", 2, "₱"),
    ISO4217Currency("CUC", 931, "Peso Convertible", 2, "$"),
    ISO4217Currency("ANG", 532, "Netherlands Antillean Guilder", 2, "NAƒ"),
    ISO4217Currency("CZK", 203, "Czech Koruna", 2, "Kč"),
    ISO4217Currency("DKK", 208, "Danish Krone", 2, "Kr"),
    ISO4217Currency("DJF", 262, "Djibouti Franc", 0, "Fdj"),
    ISO4217Currency("DOP", 214, "Dominican Peso", 2, "RD$", "$"),
    ISO4217Currency("EGP", 818, "Egyptian Pound", 2, "E£", "£"),
    ISO4217Currency("SVC", 222, "El Salvador Colon", 2),
    ISO4217Currency("ERN", 232, "Nakfa", 2, "Nkf"),
    ISO4217Currency("SZL", 748, "Lilangeni", 2, "L"),
    ISO4217Currency("ETB", 230, "Ethiopian Birr", 2, "Br"),
    ISO4217Currency("FKP", 238, "Falkland Islands Pound", 2, "£"),
    ISO4217Currency("FJD", 242, "Fiji Dollar", 2, "FJ$", "$"),
    ISO4217Currency("XPF", 953, "CFP Franc", 0, "₣"),
    ISO4217Currency("GMD", 270, "Dalasi", 2, "D"),
    ISO4217Currency("GEL", 981, "Lari", 2, "₾"),
    ISO4217Currency("GHS", 936, "Ghana Cedi", 2, "₵"),
    ISO4217Currency("GIP", 292, "Gibraltar Pound", 2, "£"),
    ISO4217Currency("GTQ", 320, "Quetzal", 2, "Q"),
    ISO4217Currency("GBP", 826, "Pound Sterling", 2, "£"),
    ISO4217Currency("GNF", 324, "Guinean Franc", 0, "FG"),
    ISO4217Currency("GYD", 328, "Guyana Dollar", 2, "GY$"),
    ISO4217Currency("HTG", 332, "Gourde", 2, "G"),
    ISO4217Currency("HNL", 340, "Lempira", 2, "L"),
    ISO4217Currency("HKD", 344, "Hong Kong Dollar", 2, "HK$"),
    ISO4217Currency("HUF", 348, "Forint", 2, "Ft"),
    ISO4217Currency("ISK", 352, "Iceland Krona", 0, "kr"),
    ISO4217Currency("IDR", 360, "Rupiah", 2, "Rp"),
    ISO4217Currency("XDR", 960, "SDR (Special Drawing Right)", None, "SDR"),
    ISO4217Currency("IRR", 364, "Iranian Rial", 2, "﷼"),
    ISO4217Currency("IQD", 368, "Iraqi Dinar", 3, "د.ع"),
    ISO4217Currency("ILS", 376, "New Israeli Sheqel", 2, "₪"),
    ISO4217Currency("JMD", 388, "Jamaican Dollar", 2, "J$"),
    ISO4217Currency("JPY", 392, "Yen", 0, "¥"),
    ISO4217Currency("JOD", 400, "Jordanian Dinar", 3, "د.أ"),
    ISO4217Currency("KZT", 398, "Tenge", 2, "₸"),
    ISO4217Currency("KES", 404, "Kenyan Shilling", 2, "KSh", "Sh"),
    ISO4217Currency("KPW", 408, "North Korean Won", 2, "₩"),
    ISO4217Currency("KRW", 410, "Won", 0, "₩"),
    ISO4217Currency("KWD", 414, "Kuwaiti Dinar", 3, "KD"),
    ISO4217Currency("KGS", 417, "Som", 2, "⃀"),
    ISO4217Currency("LAK", 418, "Lao Kip", 2, "₭"),
    ISO4217Currency("LBP", 422, "Lebanese Pound", 2, "ل.ل"),
    ISO4217Currency("LSL", 426, "Loti", 2, "L"),
    ISO4217Currency("ZAR", 710, "Rand", 2, "R"),
    ISO4217Currency("LRD", 430, "Liberian Dollar", 2, "LD$", "$"),
    ISO4217Currency("LYD", 434, "Libyan Dinar", 3, "ل.د"),
    ISO4217Currency("CHF", 756, "Swiss Franc", 2, "Fr."),
    ISO4217Currency("MOP", 446, "Pataca", 2, "MOP$"),
    ISO4217Currency("MKD", 807, "Denar", 2, "ден"),
    ISO4217Currency("MGA", 969, "Malagasy Ariary", 2, "Ar"),
    ISO4217Currency("MWK", 454, "Malawi Kwacha", 2, "MK"),
    ISO4217Currency("MYR", 458, "Malaysian Ringgit", 2, "RM"),
    ISO4217Currency("MVR", 462, "Rufiyaa", 2, "Rf"),
    ISO4217Currency("MRU", 929, "Ouguiya", 2, "UM"),
    ISO4217Currency("MUR", 480, "Mauritius Rupee", 2, "Rs"),
    ISO4217Currency("XUA", 965, "ADB Unit of Account", None),
    ISO4217Currency("MXN", 484, "Mexican Peso", 2, "$"),
    ISO4217Currency("MXV", 979, "Mexican Unidad de Inversion (UDI)", 2),
    ISO4217Currency("MDL", 498, "Moldovan Leu", 2, "L"),
    ISO4217Currency("MNT", 496, "Tugrik", 2, "₮"),
    ISO4217Currency("MAD", 504, "Moroccan Dirham", 2, "DH"),
    ISO4217Currency("MZN", 943, "Mozambique Metical", 2, "MT"),
    ISO4217Currency("MMK", 104, "Kyat", 2, "K"),
    ISO4217Currency("NAD", 516, "Namibia Dollar", 2, "N$"),
    ISO4217Currency("NPR", 524, "Nepalese Rupee", 2, "NRs"),
    ISO4217Currency("NIO", 558, "Cordoba Oro", 2, "C$"),
    ISO4217Currency("NGN", 566, "Naira", 2, "₦"),
    ISO4217Currency("OMR", 512, "Rial Omani", 3, "ر.ع."),
    ISO4217Currency("PKR", 586, "Pakistan Rupee", 2, "Rs."),
    ISO4217Currency("PAB", 590, "Balboa", 2, "B./"),
    ISO4217Currency("PGK", 598, "Kina", 2, "K"),
    ISO4217Currency("PYG", 600, "Guarani", 0, "₲"),
    ISO4217Currency("PEN", 604, "Sol", 2, "S/."),
    ISO4217Currency("PHP", 608, "Philippine Peso", 2, "₱"),
    ISO4217Currency("PLN", 985, "Zloty", 2, "zł"),
    ISO4217Currency("QAR", 634, "Qatari Rial", 2, "QR"),
    ISO4217Currency("RON", 946, "Romanian Leu", 2, "L"),
    ISO4217Currency("RUB", 643, "Russian Ruble", 2, "R"),
    ISO4217Currency("RWF", 646, "Rwanda Franc", 0, "RF"),
    ISO4217Currency("SHP", 654, "Saint Helena Pound", 2, "£"),
    ISO4217Currency("WST", 882, "Tala", 2, "WS$"),
    ISO4217Currency("STN", 930, "Dobra", 2, "Db"),
    ISO4217Currency("SAR", 682, "Saudi Riyal", 2, "SR"),
    ISO4217Currency("RSD", 941, "Serbian Dinar", 2, "din."),
    ISO4217Currency("SCR", 690, "Seychelles Rupee", 2, "SR"),
    ISO4217Currency("SLL", 694, "Leone", 2, "Le"),
    ISO4217Currency("SGD", 702, "Singapore Dollar", 2, "S$"),
    ISO4217Currency("XSU", 994, "Sucre", None),
    ISO4217Currency("SBD", 90, "Solomon Islands Dollar", 2, "SI$"),
    ISO4217Currency("SOS", 706, "Somali Shilling", 2, "Sh."),
    ISO4217Currency("SSP", 728, "South Sudanese Pound", 2, "SS£"),
    ISO4217Currency("LKR", 144, "Sri Lanka Rupee", 2, "Rs"),
    ISO4217Currency("SDG", 938, "Sudanese Pound", 2, "£SD"),
    ISO4217Currency("SRD", 968, "Surinam Dollar", 2, "$"),
    ISO4217Currency("SEK", 752, "Swedish Krona", 2, "kr"),
    ISO4217Currency("CHE", 947, "WIR Euro", 2),
    ISO4217Currency("CHW", 948, "WIR Franc", 2),
    ISO4217Currency("SYP", 760, "Syrian Pound", 2, "£S"),
    ISO4217Currency("TWD", 901, "New Taiwan Dollar", 2, "NT$", "$"),
    ISO4217Currency("TJS", 972, "Somoni", 2, "SM"),
    ISO4217Currency("TZS", 834, "Tanzanian Shilling", 2, "TSh"),
    ISO4217Currency("THB", 764, "Baht", 2, "฿"),
    ISO4217Currency("TOP", 776, "Pa’anga", 2, "T$"),
    ISO4217Currency("TTD", 780, "Trinidad and Tobago Dollar", 2, "TT$"),
    ISO4217Currency("TND", 788, "Tunisian Dinar", 3, "DT"),
    ISO4217Currency("TRY", 949, "Turkish Lira", 2, "YTL"),
    ISO4217Currency("TMT", 934, "Turkmenistan New Manat", 2, "m"),
    ISO4217Currency("UGX", 800, "Uganda Shilling", 0, "USh"),
    ISO4217Currency("UAH", 980, "Hryvnia", 2, "₴"),
    ISO4217Currency("AED", 784, "UAE Dirham", 2, "د.إ"),
    ISO4217Currency("USN", 997, "US Dollar (Next day)", 2, "US$", "$"),
    ISO4217Currency("UYU", 858, "Peso Uruguayo", 2, "$U", "$"),
    ISO4217Currency("UYI", 940, "Uruguay Peso en Unidades Indexadas (UI)", 0),
    ISO4217Currency("UYW", 927, "Unidad Previsional", 4),
    ISO4217Currency("UZS", 860, "Uzbekistan Sum", 2, "сум"),
    ISO4217Currency("VUV", 548, "Vatu", 0, "VT"),
    ISO4217Currency("VES", 928, "Bolívar Soberano", 2, "Bs.S"),
    ISO4217Currency("VND", 704, "Dong", 0, "₫"),
    ISO4217Currency("YER", 886, "Yemeni Rial", 2, "﷼"),
    ISO4217Currency("ZMW", 967, "Zambian Kwacha", 2, "ZK"),
    ISO4217Currency("ZWL", 932, "Zimbabwe Dollar", 2),
    ISO4217Currency("XBA", 955, "Bond Markets Unit European Composite Unit (EURCO)", None),
    ISO4217Currency("XBB", 956, "Bond Markets Unit European Monetary Unit (E.M.U.-6)", None),
    ISO4217Currency("XBC", 957, "Bond Markets Unit European Unit of Account 9 (E.U.A.-9)", None),
    ISO4217Currency("XBD", 958, "Bond Markets Unit European Unit of Account 17 (E.U.A.-17)", None),
    ISO4217Currency("XTS", 963, "Codes specifically reserved for testing purposes", None),
    ISO4217Currency("XXX", 999, "The codes assigned for transactions where no currency is involved", None),
    ISO4217Currency("XAU", 959, "Gold", None),
    ISO4217Currency("XPD", 964, "Palladium", None),
    ISO4217Currency("XPT", 962, "Platinum", None),
    ISO4217Currency("XAG", 961, "Silver", None),
]
# fmt: on
