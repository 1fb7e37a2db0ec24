"""Literal exception lexicons consulted by the letter rules.

These are plain data: upper-case words and word fragments for spellings whose
pronunciation in American English departs from what the general rules would
produce (names and loanwords of German, Slavic, Spanish, French, Greek and
other origin). Rules only ever look them up through the context matcher, so
each table can be audited and diffed on its own.

Tables are ordered shortest to longest within each group.
"""

# Names beginning with J that also get an alternate initial 'Y' sound,
# e.g. "Jan", "Jensen", "Jakubowski".
J_NAMES_WITH_Y_ALTERNATE: tuple[str, ...] = (
    "JAN", "JON", "JAN", "JIN", "JEN",
    "JUHL", "JULY", "JOEL", "JOHN", "JOSH", "JUDE", "JUNE", "JONI", "JULI", "JENA",
    "JUNG", "JINA", "JANA", "JENI", "JOEL", "JANN", "JONA", "JENE", "JULE", "JANI",
    "JONG", "JOHN", "JEAN", "JUNG", "JONE", "JARA", "JUST", "JOST", "JAHN", "JACO",
    "JANG", "JUDE", "JONE",
    "JOANN", "JANEY", "JANAE", "JOANA", "JUTTA", "JULEE", "JANAY", "JANEE", "JETTA",
    "JOHNA", "JOANE", "JAYNA", "JANES", "JONAS", "JONIE", "JUSTA", "JUNIE", "JUNKO",
    "JENAE", "JULIO", "JINNY", "JOHNS", "JACOB", "JETER", "JAFFE", "JESKE", "JANKE",
    "JAGER", "JANIK", "JANDA", "JOSHI", "JULES", "JANTZ", "JEANS", "JUDAH", "JANUS",
    "JENNY", "JENEE", "JONAH", "JONAS", "JACOB", "JOSUE", "JOSEF", "JULES", "JULIE",
    "JULIA", "JANIE", "JANIS", "JENNA", "JANNA", "JEANA", "JENNI", "JEANE", "JONNA",
    "JORDAN", "JORDON", "JOSEPH", "JOSHUA", "JOSIAH", "JOSPEH", "JUDSON", "JULIAN",
    "JULIUS", "JUNIOR", "JUDITH", "JOESPH", "JOHNIE", "JOANNE", "JEANNE", "JOANNA",
    "JOSEFA", "JULIET", "JANNIE", "JANELL", "JASMIN", "JANINE", "JOHNNY", "JEANIE",
    "JEANNA", "JOHNNA", "JOELLE", "JOVITA", "JOSEPH", "JONNIE", "JANEEN", "JANINA",
    "JOANIE", "JAZMIN", "JOHNIE", "JANENE", "JOHNNY", "JONELL", "JENELL", "JANETT",
    "JANETH", "JENINE", "JOELLA", "JOEANN", "JULIAN", "JOHANA", "JENICE", "JANNET",
    "JANISE", "JULENE", "JOSHUA", "JANEAN", "JAIMEE", "JOETTE", "JANYCE", "JENEVA",
    "JORDAN", "JACOBS", "JENSEN", "JOSEPH", "JANSEN", "JORDON", "JULIAN", "JAEGER",
    "JACOBY", "JENSON", "JARMAN", "JOSLIN", "JESSEN", "JAHNKE", "JACOBO", "JULIEN",
    "JOSHUA", "JEPSON", "JULIUS", "JANSON", "JACOBI", "JUDSON", "JARBOE", "JOHSON",
    "JANZEN", "JETTON", "JUNKER", "JONSON", "JAROSZ", "JENNER", "JAGGER", "JASMIN",
    # "JAKOB" sits among longer names; every candidate is tried, so it still matches
    "JEPSEN", "JORDEN", "JANNEY", "JUHASZ", "JERGEN", "JAKOB",
    "JOHNSON", "JOHNNIE", "JASMINE", "JEANNIE", "JOHANNA", "JANELLE", "JANETTE",
    "JULIANA", "JUSTINA", "JOSETTE", "JOELLEN", "JENELLE", "JULIETA", "JULIANN",
    "JULISSA", "JENETTE", "JANETTA", "JOSELYN", "JONELLE", "JESENIA", "JANESSA",
    "JAZMINE", "JEANENE", "JOANNIE", "JADWIGA", "JOLANDA", "JULIANE", "JANUARY",
    "JEANICE", "JANELLA", "JEANETT", "JENNINE", "JOHANNE", "JOHNSIE", "JANIECE",
    "JOHNSON", "JENNELL", "JAMISON", "JANSSEN", "JOHNSEN", "JARDINE", "JAGGERS",
    "JURGENS", "JOURDAN", "JULIANO", "JOSEPHS", "JHONSON", "JOZWIAK", "JANICKI",
    "JELINEK", "JANSSON", "JOACHIM", "JANELLE", "JACOBUS", "JENNING", "JANTZEN",
    "JOHNNIE",
    "JOSEFINA", "JEANNINE", "JULIANNE", "JULIANNA", "JONATHAN", "JONATHON",
    "JEANETTE", "JANNETTE", "JEANETTA", "JOHNETTA", "JENNEFER", "JULIENNE",
    "JOSPHINE", "JEANELLE", "JOHNETTE", "JULIEANN", "JOSEFINE", "JULIETTA",
    "JOHNSTON", "JACOBSON", "JACOBSEN", "JOHANSEN", "JOHANSON", "JAWORSKI",
    "JENNETTE", "JELLISON", "JOHANNES", "JASINSKI", "JUERGENS", "JARNAGIN",
    "JEREMIAH", "JEPPESEN", "JARNIGAN", "JANOUSEK",
    "JOHNATHAN", "JOHNATHON", "JORGENSEN", "JEANMARIE", "JOSEPHINA", "JEANNETTE",
    "JOSEPHINE", "JEANNETTA", "JORGENSON", "JANKOWSKI", "JOHNSTONE", "JABLONSKI",
    "JOSEPHSON", "JOHANNSEN", "JURGENSEN", "JIMMERSON", "JOHANSSON",
    "JAKUBOWSKI",
)

# Germanic or Slavic names beginning with W, where 'W' may be pronounced 'V',
# e.g. "Witter" should match "Vitter".
W_NAMES_GERMANIC_OR_SLAVIC: tuple[str, ...] = (
    "WEE", "WIX", "WAX",
    "WOLF", "WEIS", "WAHL", "WALZ", "WEIL", "WERT", "WINE", "WILK", "WALT", "WOLL",
    "WADA", "WULF", "WEHR", "WURM", "WYSE", "WENZ", "WIRT", "WOLK", "WEIN", "WYSS",
    "WASS", "WANN", "WINT", "WINK", "WILE", "WIKE", "WIER", "WELK", "WISE",
    "WIRTH", "WIESE", "WITTE", "WENTZ", "WOLFF", "WENDT", "WERTZ", "WILKE", "WALTZ",
    "WEISE", "WOOLF", "WERTH", "WEESE", "WURTH", "WINES", "WARGO", "WIMER", "WISER",
    "WAGER", "WILLE", "WILDS", "WAGAR", "WERTS", "WITTY", "WIENS", "WIEBE", "WIRTZ",
    "WYMER", "WULFF", "WIBLE", "WINER", "WIEST", "WALKO", "WALLA", "WEBRE", "WEYER",
    "WYBLE", "WOMAC", "WILTZ", "WURST", "WOLAK", "WELKE", "WEDEL", "WEIST", "WYGAN",
    "WUEST", "WEISZ", "WALCK", "WEITZ", "WYDRA", "WANDA", "WILMA", "WEBER",
    "WETZEL", "WEINER", "WENZEL", "WESTER", "WALLEN", "WENGER", "WALLIN", "WEILER",
    "WIMMER", "WEIMER", "WYRICK", "WEGNER", "WINNER", "WESSEL", "WILKIE", "WEIGEL",
    "WOJCIK", "WENDEL", "WITTER", "WIENER", "WEISER", "WEXLER", "WACKER", "WISNER",
    "WITMER", "WINKLE", "WELTER", "WIDMER", "WITTEN", "WINDLE", "WASHER", "WOLTER",
    "WILKEY", "WIDNER", "WARMAN", "WEYANT", "WEIBEL", "WANNER", "WILKEN", "WILTSE",
    "WARNKE", "WALSER", "WEIKEL", "WESNER", "WITZEL", "WROBEL", "WAGNON", "WINANS",
    "WENNER", "WOLKEN", "WILNER", "WYSONG", "WYCOFF", "WUNDER", "WINKEL", "WIDMAN",
    "WELSCH", "WEHNER", "WEIGLE", "WETTER", "WUNSCH", "WHITTY", "WAXMAN", "WILKER",
    "WILHAM", "WITTIG", "WITMAN", "WESTRA", "WEHRLE", "WASSER", "WILLER", "WEGMAN",
    "WARFEL", "WYNTER", "WERNER", "WAGNER", "WISSER",
    "WISEMAN", "WINKLER", "WILHELM", "WELLMAN", "WAMPLER", "WACHTER", "WALTHER",
    "WYCKOFF", "WEIDNER", "WOZNIAK", "WEILAND", "WILFONG", "WIEGAND", "WILCHER",
    "WIELAND", "WILDMAN", "WALDMAN", "WORTMAN", "WYSOCKI", "WEIDMAN", "WITTMAN",
    "WIDENER", "WOLFSON", "WENDELL", "WEITZEL", "WILLMAN", "WALDRUP", "WALTMAN",
    "WALCZAK", "WEIGAND", "WESSELS", "WIDEMAN", "WOLTERS", "WIREMAN", "WILHOIT",
    "WEGENER", "WOTRING", "WINGERT", "WIESNER", "WAYMIRE", "WHETZEL", "WENTZEL",
    "WINEGAR", "WESTMAN", "WYNKOOP", "WALLICK", "WURSTER", "WINBUSH", "WILBERT",
    "WALLACH", "WEISSER", "WEISNER", "WINDERS", "WILLMON", "WILLEMS", "WIERSMA",
    "WACHTEL", "WARNICK", "WEIDLER", "WALTRIP", "WHETSEL", "WHELESS", "WELCHER",
    "WALBORN", "WILLSEY", "WEINMAN", "WAGAMAN", "WOMMACK", "WINGLER", "WINKLES",
    "WIEDMAN", "WHITNER", "WOLFRAM", "WARLICK", "WEEDMAN", "WHISMAN", "WINLAND",
    "WEESNER", "WARTHEN", "WETZLER", "WENDLER", "WALLNER", "WOLBERT", "WITTMER",
    "WISHART", "WILLIAM",
    "WESTPHAL", "WICKLUND", "WEISSMAN", "WESTLUND", "WOLFGANG", "WILLHITE",
    "WEISBERG", "WALRAVEN", "WOLFGRAM", "WILHOITE", "WECHSLER", "WENDLING",
    "WESTBERG", "WENDLAND", "WININGER", "WHISNANT", "WESTRICK", "WESTLING",
    "WESTBURY", "WEITZMAN", "WEHMEYER", "WEINMANN", "WISNESKI", "WHELCHEL",
    "WEISHAAR", "WAGGENER", "WALDROUP", "WESTHOFF", "WIEDEMAN", "WASINGER",
    "WINBORNE",
    "WHISENANT", "WEINSTEIN", "WESTERMAN", "WASSERMAN", "WITKOWSKI", "WEINTRAUB",
    "WINKELMAN", "WINKFIELD", "WANAMAKER", "WIECZOREK", "WIECHMANN", "WOJTOWICZ",
    "WALKOWIAK", "WEINSTOCK", "WILLEFORD", "WARKENTIN", "WEISINGER", "WINKLEMAN",
    "WILHEMINA",
    "WISNIEWSKI", "WUNDERLICH", "WHISENHUNT", "WEINBERGER", "WROBLEWSKI",
    "WAGUESPACK", "WEISGERBER", "WESTERVELT", "WESTERLUND", "WASILEWSKI",
    "WILDERMUTH", "WESTENDORF", "WESOLOWSKI", "WEINGARTEN", "WINEBARGER",
    "WESTERBERG", "WANNAMAKER", "WEISSINGER",
    "WALDSCHMIDT", "WEINGARTNER", "WINEBRENNER",
    "WOLFENBARGER", "WOJCIECHOWSKI",
)

# Names beginning with SW that get an alternate "SV" pronunciation.
SW_NAMES_SV_ALTERNATE: tuple[str, ...] = (
    "SWANSON", "SWENSON", "SWINSON", "SWENSEN", "SWOBODA",
    "SWIDERSKI", "SWARTHOUT", "SWEARENGIN",
)

# Names beginning with SW that get an alternate "XV" pronunciation.
SW_NAMES_XV_ALTERNATE: tuple[str, ...] = (
    "SWART", "SWARTZ", "SWARTS", "SWIGER",
    "SWITZER", "SWANGER", "SWIGERT", "SWIGART", "SWIHART",
    "SWEITZER", "SWATZELL", "SWINDLER", "SWINEHART", "SWEARINGEN",
)

# Whole words whose final 'E' is pronounced: greek, spanish, japanese,
# italian and french words normally written with an acute accent.
E_PRONOUNCED_AT_END: tuple[str, ...] = (
    "ACME", "NIKE", "CAFE", "RENE", "LUPE", "JOSE", "ESME",
    "LETHE", "CADRE", "TILDE", "SIGNE", "POSSE", "LATTE", "ANIME", "DOLCE", "CROCE",
    "ADOBE", "OUTRE", "JESSE", "JAIME", "JAFFE", "BENGE", "RUNGE",
    "CHILE", "DESME", "CONDE", "URIBE", "LIBRE", "ANDRE",
    "HECATE", "PSYCHE", "DAPHNE", "PENSKE", "CLICHE", "RECIPE",
    "TAMALE", "SESAME", "SIMILE", "FINALE", "KARATE", "RENATE", "SHANTE",
    "OBERLE", "COYOTE", "KRESGE", "STONGE", "STANGE", "SWAYZE", "FUENTE",
    "SALOME", "URRIBE",
    "ECHIDNE", "ARIADNE", "MEINEKE", "PORSCHE", "ANEMONE", "EPITOME",
    "SYNCOPE", "SOUFFLE", "ATTACHE", "MACHETE", "KARAOKE", "BUKKAKE",
    "VICENTE", "ELLERBE", "VERSACE",
    "PENELOPE", "CALLIOPE", "CHIPOTLE", "ANTIGONE", "KAMIKAZE", "EURIDICE",
    "YOSEMITE", "FERRANTE",
    "HYPERBOLE", "GUACAMOLE", "XANTHIPPE",
    "SYNECDOCHE",
)

# Words starting with these keep the 'E' of a final "-ES" pronounced,
# e.g. greek names such as "Diogenes" or hispanic names such as "Robles".
E_PRONOUNCED_BEFORE_FINAL_S: tuple[str, ...] = (
    "INES",
    "LOPES", "ESTES", "GOMES", "NUNES", "ALVES", "ICKES",
    "INNES", "PERES", "WAGES", "NEVES", "BENES", "DONES",
    "CORTES", "CHAVES", "VALDES", "ROBLES", "TORRES", "FLORES", "BORGES",
    "NIEVES", "MONTES", "SOARES", "VALLES", "GEDDES", "ANDRES", "VIAJES",
    "CALLES", "FONTES", "HERMES", "ACEVES", "BATRES", "MATHES",
    "DELORES", "MORALES", "DOLORES", "ANGELES", "ROSALES", "MIRELES", "LINARES",
    "PERALES", "PAREDES", "BRIONES", "SANCHES", "CAZARES", "REVELES", "ESTEVES",
    "ALVARES", "MATTHES", "SOLARES", "CASARES", "CACERES", "STURGES", "RAMIRES",
    "FUNCHES", "BENITES", "FUENTES", "PUENTES", "TABARES", "HENTGES", "VALORES",
    "GONZALES", "MERCEDES", "FAGUNDES", "JOHANNES", "GONSALES", "BERMUDES",
    "CESPEDES", "BETANCES", "TERRONES", "DIOGENES", "CORRALES", "CABRALES",
    "MARTINES", "GRAJALES",
    "CERVANTES", "FERNANDES", "GONCALVES", "BENEVIDES", "CIFUENTES", "SIFUENTES",
    "SERVANTES", "HERNANDES", "BENAVIDES",
    "ARCHIMEDES", "CARRIZALES", "MAGALLANES",
)

# Names where "-ED" at the end keeps its 'E' pronounced, e.g. "Ahmed".
E_PRONOUNCED_BEFORE_FINAL_D: tuple[str, ...] = (
    "ABED", "IMED", "JARED", "AHMED", "HAMED", "JAVED",
    "NORRED", "MEDVED", "MERCED", "ALLRED", "KHALED", "RASHED", "MASJED",
    "MOHAMED", "MOHAMMED", "MUHAMMED", "MOUHAMED", "ANTIPODES", "ANOPHELES",
)

# Compound roots where the 'E' between the root and a following suffix or
# word is silent, grouped by the length of the root, e.g. "Bridgewater".
SILENT_E_ROOTS_4: tuple[str, ...] = (
    "BARE", "FIRE", "FORE", "GATE", "HAGE", "HAVE",
    "HAZE", "HOLE", "CAPE", "HUSE", "LACE", "LINE",
    "LIVE", "LOVE", "MORE", "MOSE", "MORE", "NICE",
    "RAKE", "ROBE", "ROSE", "SISE", "SIZE", "WARE",
    "WAKE", "WISE", "WINE",
)

SILENT_E_ROOTS_5: tuple[str, ...] = (
    "BLAKE", "BRAKE", "BRINE", "CARLE", "CLEVE", "DUNNE",
    "HEDGE", "HOUSE", "JEFFE", "LUNCE", "STOKE", "STONE",
    "THORE", "WEDGE", "WHITE",
)

SILENT_E_ROOTS_6: tuple[str, ...] = ("BRIDGE", "CHEESE")

# Endings after a compound root that cause the 'E' to be pronounced after all,
# e.g. "bridgette", "olena", "bridgewood".
E_PRONOUNCING_SUFFIXES: tuple[str, ...] = (
    "T", "R", "TA", "TT", "NA", "NO", "NE",
    "RS", "RE", "LA", "AU", "RO", "RA", "TTE", "LIA", "NOW", "ROS", "RAS",
    "WOOD", "WATER", "WORTH",
)

# Greek roots where an initial "CH" is pronounced 'K', e.g. "chemistry".
GREEK_CH_INITIAL_6: tuple[str, ...] = (
    "CHAMOM", "CHARAC", "CHARIS", "CHARTO", "CHARTU", "CHARYB", "CHRIST", "CHEMIC",
    "CHILIA",
)

GREEK_CH_INITIAL_5: tuple[str, ...] = (
    "CHEMI", "CHEMO", "CHEMU", "CHEMY", "CHOND", "CHONA", "CHONI", "CHOIR", "CHASM",
    "CHARO", "CHROM", "CHROI", "CHAMA", "CHALC", "CHALD", "CHAET", "CHIRO", "CHILO",
    "CHELA", "CHOUS", "CHEIL", "CHEIR", "CHEIM", "CHITI", "CHEOP",
)

# Greek and other roots where a medial "-ACH-" is pronounced 'K',
# e.g. "achilles", "acheron".
GREEK_ACH_MEDIAL: tuple[str, ...] = (
    "ACHISH", "ACHILL", "ACHAIA", "ACHENE", "ACHAIAN", "ACHATES", "ACHIRAL",
    "ACHERON", "ACHILLEA", "ACHIMAAS", "ACHILARY", "ACHELOUS", "ACHENIAL",
    "ACHERNAR", "ACHALASIA", "ACHILLEAN", "ACHIMENES", "ACHIMELECH", "ACHITOPHEL",
)

# Words ending in "-IER" where the french 'R' is silent, keyed by how many
# letters precede the "IER".
SILENT_R_IER_3: tuple[str, ...] = ("MET", "VIV", "LUC")

SILENT_R_IER_4: tuple[str, ...] = (
    "CART", "DOSS", "FOUR", "OLIV", "BUST", "DAUM", "ATEL", "SONN",
    "CORM", "MERC", "PELT", "POIR", "BERN", "FORT", "GREN", "SAUC", "GAGN", "GAUT",
    "GRAN", "FORC", "MESS", "LUSS", "MEUN", "POTH", "HOLL", "CHEN",
)

SILENT_R_IER_5: tuple[str, ...] = (
    "CROUP", "TORCH", "CLOUT", "FOURN", "GAUTH", "TROTT", "DEROS", "CHART",
)

SILENT_R_IER_6: tuple[str, ...] = (
    "CHEVAL", "LAVOIS", "PELLET", "SOMMEL", "TREPAN", "LETELL", "COLOMB",
)

# French words familiar to americans that end in a silent 'S'.
SILENT_S_FINAL_STARTS: tuple[str, ...] = (
    "YVES", "ARKANSAS", "FRANCAIS", "CRUDITES", "BRUYERES",
    "DESCARTES", "DESCHUTES", "DESCHAMPS", "DESROCHES", "DESCHENES",
    "RENDEZVOUS", "CONTRETEMPS", "DESLAURIERS",
)

SILENT_S_FINAL_ENDS: tuple[str, ...] = (
    "CAMUS", "YPRES",
    "MESNES", "DEBRIS", "BLANCS", "INGRES", "CANNES",
    "CHABLIS", "APROPOS", "JACQUES", "ELYSEES", "OEUVRES", "GEORGES", "DESPRES",
)

# French words familiar to americans where a final 'T' is silent, keyed by
# how many letters precede the 'T'.
SILENT_T_FRENCH_4: tuple[str, ...] = (
    "BERET", "BIDET", "FILET", "DEBUT", "DEPOT", "PINOT", "TAROT",
)

SILENT_T_FRENCH_5: tuple[str, ...] = (
    "BALLET", "BUFFET", "CACHET", "CHALET", "ESPRIT", "RAGOUT", "GOULET", "CHABOT",
    "BENOIT",
)

SILENT_T_FRENCH_6: tuple[str, ...] = (
    "GOURMET", "BOUQUET", "CROCHET", "CROQUET", "PARFAIT", "PINCHOT", "CABARET",
    "PARQUET", "RAPPORT", "TOUCHET", "COURBET", "DIDEROT",
)

SILENT_T_FRENCH_7: tuple[str, ...] = (
    "ENTREPOT", "CABERNET", "DUBONNET", "MASSENET", "MUSCADET", "RICOCHET",
    "ESCARGOT",
)

SILENT_T_FRENCH_8: tuple[str, ...] = (
    "SOBRIQUET", "CABRIOLET", "CASSOULET", "OUBRIQUET", "CAMEMBERT",
)

# Spanish words and names where 'J' is pronounced 'H', matched two letters
# before the 'J', e.g. "Tejeda", "Lujan".
SPANISH_J_MEDIAL: tuple[str, ...] = (
    "TEJED", "TEJAD", "LUJAN", "FAJAR", "BEJAR", "BOJOR", "CAJIG",
    "DEJAS", "DUJAR", "DUJAN", "MIJAR", "MEJOR", "NAJAR",
    "NOJOS", "RAJED", "RIJAL", "REJON", "TEJAN", "UIJAN",
)

# Spanish endings where 'J' is pronounced 'H', e.g. "rioja", "ojos".
SPANISH_J_ENDINGS: tuple[str, ...] = (
    "OJA", "EJA", "AJOS", "EJOS", "OJAS", "OJOS", "UJON",
    "AJOZ", "AJAL", "UJAR", "EJON", "EJAN", "AJARA",
)

# Combining forms where "-SH-" splits into 'S' + 'H', e.g. "clotheshorse".
SH_COMBINING_FORMS: tuple[str, ...] = (
    "HEIM", "HOEK", "HOLM", "HOLZ", "HOOD", "HEAD", "HEID",
    "HAAR", "HORS", "HOLE", "HUND", "HELM", "HAWK", "HILL", "HEART", "HATCH",
    "HOUSE", "HOUND", "HONOR",
)

# Combining forms where "-PH-" is 'P' + 'H', e.g. "upheaval", "cupholder".
PH_COMBINING_FORMS: tuple[str, ...] = (
    "AM", "EAD", "OLE", "ELD", "ILL", "OLD", "EAP", "ERD", "ARD", "ANG",
    "ORN", "EAV", "ART", "OUSE", "AMMER", "AZARD", "UGGER", "OLSTER",
)
