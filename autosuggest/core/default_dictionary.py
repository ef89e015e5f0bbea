# default_dictionary.py
# Built-in seed vocabulary: programming / web terms plus common English
# function words, each with a starting frequency.
# A handful of words appear twice (e.g. "algorithm", "code"); seeding
# through PrefixDictionary.insert_many sums their frequencies.

from typing import List, Tuple

DEFAULT_DICTIONARY: List[Tuple[str, int]] = [
    ("javascript", 150),
    ("java", 120),
    ("python", 180),
    ("programming", 100),
    ("algorithm", 90),
    ("data", 140),
    ("database", 85),
    ("structure", 75),
    ("development", 95),
    ("developer", 110),
    ("design", 88),
    ("designer", 72),
    ("application", 105),
    ("artificial", 92),
    ("intelligence", 88),
    ("machine", 78),
    ("learning", 95),
    ("network", 68),
    ("neural", 65),
    ("technology", 115),
    ("software", 125),
    ("hardware", 70),
    ("computer", 135),
    ("coding", 98),
    ("code", 145),
    ("function", 82),
    ("array", 76),
    ("string", 74),
    ("object", 85),
    ("class", 79),
    ("interface", 71),
    ("backend", 67),
    ("frontend", 89),
    ("fullstack", 63),
    ("framework", 77),
    ("library", 73),
    ("package", 65),
    ("module", 68),
    ("component", 81),
    ("element", 62),
    ("variable", 71),
    ("constant", 58),
    ("parameter", 61),
    ("argument", 59),
    ("return", 86),
    ("async", 72),
    ("await", 69),
    ("promise", 75),
    ("callback", 64),
    ("event", 77),
    ("listener", 56),
    ("handler", 63),
    ("method", 78),
    ("property", 66),
    ("attribute", 58),
    ("value", 91),
    ("key", 73),
    ("index", 68),
    ("query", 72),
    ("search", 94),
    ("filter", 67),
    ("sort", 63),
    ("map", 71),
    ("reduce", 57),
    ("foreach", 65),
    ("loop", 74),
    ("iteration", 55),
    ("recursive", 52),
    ("recursion", 54),
    ("algorithm", 76),
    ("optimization", 59),
    ("performance", 81),
    ("efficiency", 62),
    ("memory", 68),
    ("storage", 64),
    ("cache", 61),
    ("session", 58),
    ("cookie", 55),
    ("token", 67),
    ("authentication", 73),
    ("authorization", 64),
    ("security", 79),
    ("encryption", 61),
    ("validation", 68),
    ("error", 87),
    ("exception", 59),
    ("debug", 72),
    ("test", 84),
    ("testing", 76),
    ("unit", 62),
    ("integration", 58),
    ("deployment", 71),
    ("production", 74),
    ("environment", 66),
    ("configuration", 63),
    ("settings", 69),
    ("options", 65),
    ("preferences", 54),
    ("default", 71),
    ("custom", 68),
    ("template", 64),
    ("pattern", 61),
    ("model", 73),
    ("view", 76),
    ("controller", 67),
    ("service", 72),
    ("repository", 58),
    ("entity", 55),
    ("schema", 63),
    ("migration", 56),
    ("seed", 48),
    ("factory", 52),
    ("builder", 59),
    ("manager", 61),
    ("helper", 64),
    ("utility", 58),
    ("tool", 73),
    ("toolkit", 51),
    ("plugin", 62),
    ("extension", 59),
    ("addon", 47),
    ("widget", 56),
    ("feature", 78),
    ("functionality", 64),
    ("capability", 53),
    ("behavior", 57),
    ("action", 69),
    ("operation", 61),
    ("process", 74),
    ("procedure", 52),
    ("workflow", 63),
    ("pipeline", 58),
    ("stream", 61),
    ("buffer", 54),
    ("queue", 57),
    ("stack", 66),
    ("heap", 51),
    ("tree", 63),
    ("graph", 59),
    ("node", 72),
    ("edge", 48),
    ("vertex", 45),
    ("path", 68),
    ("route", 71),
    ("router", 66),
    ("navigate", 57),
    ("navigation", 64),
    ("link", 73),
    ("anchor", 49),
    ("button", 81),
    ("input", 88),
    ("output", 67),
    ("form", 79),
    ("field", 71),
    ("label", 64),
    ("placeholder", 58),
    ("tooltip", 52),
    ("modal", 69),
    ("dialog", 61),
    ("popup", 56),
    ("dropdown", 67),
    ("menu", 74),
    ("navbar", 63),
    ("sidebar", 59),
    ("footer", 66),
    ("header", 72),
    ("section", 68),
    ("container", 71),
    ("wrapper", 58),
    ("panel", 61),
    ("card", 76),
    ("tile", 51),
    ("grid", 69),
    ("flex", 73),
    ("layout", 74),
    ("responsive", 68),
    ("adaptive", 54),
    ("mobile", 77),
    ("desktop", 65),
    ("tablet", 56),
    ("device", 69),
    ("screen", 72),
    ("display", 74),
    ("render", 76),
    ("paint", 48),
    ("style", 81),
    ("css", 92),
    ("html", 98),
    ("dom", 71),
    ("browser", 78),
    ("window", 73),
    ("document", 76),
    ("element", 79),
    ("selector", 66),
    ("classname", 62),
    ("identifier", 54),
    ("tag", 68),
    ("attribute", 63),
    ("property", 71),
    ("animation", 74),
    ("transition", 69),
    ("transform", 64),
    ("translate", 57),
    ("rotate", 53),
    ("scale", 61),
    ("opacity", 59),
    ("visibility", 52),
    ("overflow", 58),
    ("scroll", 71),
    ("position", 68),
    ("absolute", 61),
    ("relative", 64),
    ("fixed", 59),
    ("static", 56),
    ("sticky", 52),
    ("float", 54),
    ("clear", 57),
    ("margin", 66),
    ("padding", 68),
    ("border", 71),
    ("radius", 63),
    ("shadow", 67),
    ("gradient", 64),
    ("color", 84),
    ("background", 79),
    ("foreground", 51),
    ("text", 86),
    ("font", 77),
    ("size", 73),
    ("weight", 64),
    ("height", 69),
    ("width", 72),
    ("length", 61),
    ("dimension", 48),
    ("coordinate", 52),
    ("axis", 54),
    ("vector", 57),
    ("matrix", 53),
    ("calculation", 59),
    ("compute", 61),
    ("execute", 63),
    ("run", 76),
    ("start", 71),
    ("stop", 64),
    ("pause", 57),
    ("resume", 52),
    ("continue", 58),
    ("break", 61),
    ("switch", 66),
    ("case", 63),
    ("condition", 67),
    ("if", 95),
    ("else", 89),
    ("then", 74),
    ("when", 68),
    ("while", 72),
    ("for", 87),
    ("do", 81),
    ("try", 79),
    ("catch", 76),
    ("finally", 61),
    ("throw", 64),
    ("new", 83),
    ("this", 91),
    ("self", 58),
    ("super", 54),
    ("extends", 59),
    ("implements", 52),
    ("import", 77),
    ("export", 74),
    ("require", 68),
    ("include", 61),
    ("exclude", 48),
    ("public", 66),
    ("private", 63),
    ("protected", 57),
    ("static", 64),
    ("final", 56),
    ("abstract", 51),
    ("virtual", 49),
    ("override", 53),
    ("overload", 47),
    ("inherit", 52),
    ("polymorphism", 43),
    ("encapsulation", 45),
    ("abstraction", 47),
    ("inheritance", 51),
    ("composition", 48),
    ("aggregation", 42),
    ("association", 44),
    ("dependency", 56),
    ("injection", 54),
    ("singleton", 49),
    ("factory", 53),
    ("observer", 48),
    ("strategy", 51),
    ("decorator", 52),
    ("adapter", 49),
    ("facade", 46),
    ("proxy", 51),
    ("bridge", 44),
    ("composite", 45),
    ("flyweight", 38),
    ("command", 57),
    ("iterator", 52),
    ("mediator", 43),
    ("memento", 39),
    ("state", 68),
    ("visitor", 41),
    ("chain", 49),
    ("responsibility", 44),
    ("interpreter", 42),
    ("template", 56),
    ("prototype", 51),
    ("builder", 54),
    ("clone", 53),
    ("copy", 67),
    ("duplicate", 48),
    ("create", 79),
    ("read", 76),
    ("update", 81),
    ("delete", 74),
    ("crud", 62),
    ("persist", 54),
    ("save", 78),
    ("load", 71),
    ("fetch", 77),
    ("retrieve", 59),
    ("get", 94),
    ("set", 88),
    ("put", 64),
    ("post", 72),
    ("patch", 56),
    ("options", 61),
    ("head", 48),
    ("request", 78),
    ("response", 81),
    ("status", 73),
    ("code", 84),
    ("message", 76),
    ("body", 68),
    ("header", 71),
    ("cookie", 59),
    ("session", 64),
    ("client", 74),
    ("server", 82),
    ("host", 63),
    ("port", 67),
    ("protocol", 61),
    ("http", 79),
    ("https", 76),
    ("ssl", 58),
    ("tls", 54),
    ("certificate", 56),
    ("key", 72),
    ("secret", 64),
    ("hash", 68),
    ("salt", 51),
    ("pepper", 42),
    ("encrypt", 63),
    ("decrypt", 57),
    ("encode", 61),
    ("decode", 59),
    ("serialize", 56),
    ("deserialize", 52),
    ("parse", 73),
    ("stringify", 64),
    ("format", 69),
    ("transform", 66),
    ("convert", 63),
    ("cast", 54),
    ("type", 79),
    ("typeof", 61),
    ("instanceof", 58),
    ("is", 87),
    ("has", 74),
    ("can", 68),
    ("should", 71),
    ("must", 64),
    ("will", 76),
    ("would", 59),
    ("could", 57),
    ("may", 62),
    ("might", 54),
    ("need", 73),
    ("want", 68),
    ("like", 71),
    ("prefer", 52),
    ("choose", 58),
    ("select", 69),
    ("pick", 51),
    ("find", 76),
    ("locate", 47),
    ("discover", 53),
    ("detect", 56),
    ("identify", 61),
    ("recognize", 54),
    ("match", 68),
    ("compare", 64),
    ("contrast", 48),
    ("differ", 51),
    ("equal", 66),
    ("equivalent", 47),
    ("same", 71),
    ("similar", 63),
    ("different", 68),
    ("unique", 66),
    ("distinct", 54),
    ("separate", 58),
    ("individual", 52),
    ("single", 69),
    ("multiple", 67),
    ("many", 73),
    ("few", 61),
    ("some", 76),
    ("any", 78),
    ("all", 84),
    ("none", 58),
    ("nothing", 54),
    ("everything", 61),
    ("something", 67),
    ("anything", 63),
    ("each", 71),
    ("every", 68),
    ("both", 64),
    ("either", 57),
    ("neither", 48),
    ("or", 91),
    ("and", 96),
    ("but", 73),
    ("not", 86),
    ("nor", 51),
    ("yet", 58),
    ("so", 74),
    ("because", 69),
    ("since", 63),
    ("although", 52),
    ("though", 56),
    ("unless", 49),
    ("until", 61),
    ("before", 68),
    ("after", 71),
    ("during", 59),
    ("between", 64),
    ("among", 48),
    ("within", 58),
    ("without", 63),
    ("inside", 54),
    ("outside", 51),
    ("above", 56),
    ("below", 58),
    ("over", 67),
    ("under", 61),
    ("through", 66),
    ("across", 53),
    ("along", 52),
    ("around", 59),
    ("beside", 44),
    ("behind", 51),
    ("beyond", 48),
    ("toward", 49),
    ("against", 57),
    ("upon", 52),
    ("into", 74),
    ("onto", 51),
    ("off", 64),
    ("out", 76),
    ("up", 81),
    ("down", 74),
    ("in", 92),
    ("on", 89),
    ("at", 86),
    ("by", 81),
    ("with", 88),
    ("from", 84),
    ("to", 95),
    ("as", 83),
    ("of", 94),
]
