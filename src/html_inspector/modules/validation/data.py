# src/html_inspector/modules/validation/data.py
"""
Static HTML knowledge base used by the validation module.

All tables are immutable and loaded once at import time. Element and
attribute lists are written as ';'-separated strings (a trailing '*' marks
an entry with extra conditions in the HTML standard and is ignored when parsing).

Sources:
    http://drafts.htmlwg.org/html/master/iana.html#index
    http://drafts.htmlwg.org/html/master/dom.html#global-attributes
    http://drafts.htmlwg.org/html/master/obsolete.html#obsolete
"""
import re
from typing import Dict, FrozenSet, List, Pattern, Tuple, Union

# Either a literal name (equality) or a compiled pattern (search).
Matcher = Union[str, Pattern[str]]

# Attribute value meaning "this element accepts any attribute".
ANY_ATTRIBUTE = "any"

# --- Elements: name -> (content model, allowed attributes) ---
ELEMENT_DATA: Dict[str, Tuple[str, str]] = {
    "a": ("transparent*", "globals; href; target; download; rel; hreflang; type"),
    "abbr": ("phrasing", "globals"),
    "address": ("flow*", "globals"),
    "area": ("empty", "globals; alt; coords; shape; href; target; download; rel; hreflang; type"),
    "article": ("flow", "globals"),
    "aside": ("flow", "globals"),
    "audio": ("source*; transparent*", "globals; src; crossorigin; preload; autoplay; mediagroup; loop; muted; controls"),
    "b": ("phrasing", "globals"),
    "base": ("empty", "globals; href; target"),
    "bdi": ("phrasing", "globals"),
    "bdo": ("phrasing", "globals"),
    "blockquote": ("flow", "globals; cite"),
    "body": ("flow", "globals; onafterprint; onbeforeprint; onbeforeunload; onfullscreenchange; onfullscreenerror; onhashchange; onmessage; onoffline; ononline; onpagehide; onpageshow; onpopstate; onresize; onstorage; onunload"),
    "br": ("empty", "globals"),
    "button": ("phrasing*", "globals; autofocus; disabled; form; formaction; formenctype; formmethod; formnovalidate; formtarget; name; type; value"),
    "canvas": ("transparent", "globals; width; height"),
    "caption": ("flow*", "globals"),
    "cite": ("phrasing", "globals"),
    "code": ("phrasing", "globals"),
    "col": ("empty", "globals; span"),
    "colgroup": ("col", "globals; span"),
    "menuitem": ("empty", "globals; type; label; icon; disabled; checked; radiogroup; command"),
    "data": ("phrasing", "globals; value"),
    "datalist": ("phrasing; option", "globals"),
    "dd": ("flow", "globals"),
    "del": ("transparent", "globals; cite; datetime"),
    "details": ("summary*; flow", "globals; open"),
    "dfn": ("phrasing*", "globals"),
    "dialog": ("flow", "globals; open"),
    "div": ("flow", "globals"),
    "dl": ("dt*; dd*", "globals"),
    "dt": ("flow*", "globals"),
    "em": ("phrasing", "globals"),
    "embed": ("empty", "globals; src; type; width; height; any*"),
    "fieldset": ("legend*; flow", "globals; disabled; form; name"),
    "figcaption": ("flow", "globals"),
    "figure": ("figcaption*; flow", "globals"),
    "footer": ("flow*", "globals"),
    "form": ("flow*", "globals; accept-charset; action; autocomplete; enctype; method; name; novalidate; target"),
    "h1": ("phrasing", "globals"),
    "h2": ("phrasing", "globals"),
    "h3": ("phrasing", "globals"),
    "h4": ("phrasing", "globals"),
    "h5": ("phrasing", "globals"),
    "h6": ("phrasing", "globals"),
    "head": ("metadata content*", "globals"),
    "header": ("flow*", "globals"),
    "hr": ("empty", "globals"),
    "html": ("head*; body*", "globals; manifest"),
    "i": ("phrasing", "globals"),
    "iframe": ("text*", "globals; src; srcdoc; name; sandbox; seamless; allowfullscreen; width; height"),
    "img": ("empty", "globals; alt; src; crossorigin; usemap; ismap; width; height"),
    "input": ("empty", "globals; accept; alt; autocomplete; autofocus; checked; dirname; disabled; form; formaction; formenctype; formmethod; formnovalidate; formtarget; height; list; max; maxlength; min; multiple; name; pattern; placeholder; readonly; required; size; src; step; type; value; width"),
    "ins": ("transparent", "globals; cite; datetime"),
    "kbd": ("phrasing", "globals"),
    "keygen": ("empty", "globals; autofocus; challenge; disabled; form; keytype; name"),
    "label": ("phrasing*", "globals; form; for"),
    "legend": ("phrasing", "globals"),
    "li": ("flow", "globals; value*"),
    "link": ("empty", "globals; href; crossorigin; rel; media; hreflang; type; sizes"),
    "main": ("flow*", "globals"),
    "map": ("transparent; area*", "globals; name"),
    "mark": ("phrasing", "globals"),
    "menu": ("li*; flow*; menuitem*; hr*; menu*", "globals; type; label"),
    "meta": ("empty", "globals; name; http-equiv; content; charset"),
    "meter": ("phrasing*", "globals; value; min; max; low; high; optimum"),
    "nav": ("flow", "globals"),
    "noscript": ("varies*", "globals"),
    "object": ("param*; transparent", "globals; data; type; typemustmatch; name; usemap; form; width; height"),
    "ol": ("li", "globals; reversed; start; type"),
    "optgroup": ("option", "globals; disabled; label"),
    "option": ("text*", "globals; disabled; label; selected; value"),
    "output": ("phrasing", "globals; for; form; name"),
    "p": ("phrasing", "globals"),
    "param": ("empty", "globals; name; value"),
    "pre": ("phrasing", "globals"),
    "progress": ("phrasing*", "globals; value; max"),
    "q": ("phrasing", "globals; cite"),
    "rp": ("phrasing", "globals"),
    "rt": ("phrasing", "globals"),
    "ruby": ("phrasing; rt; rp*", "globals"),
    "s": ("phrasing", "globals"),
    "samp": ("phrasing", "globals"),
    "script": ("script, data, or script documentation*", "globals; src; type; charset; async; defer; crossorigin"),
    "section": ("flow", "globals"),
    "select": ("option, optgroup", "globals; autofocus; disabled; form; multiple; name; required; size"),
    "small": ("phrasing", "globals"),
    "source": ("empty", "globals; src; type; media"),
    "span": ("phrasing", "globals"),
    "strong": ("phrasing", "globals"),
    "style": ("varies*", "globals; media; type; scoped"),
    "sub": ("phrasing", "globals"),
    "summary": ("phrasing", "globals"),
    "sup": ("phrasing", "globals"),
    "table": ("caption*; colgroup*; thead*; tbody*; tfoot*; tr*", "globals; border"),
    "tbody": ("tr", "globals"),
    "td": ("flow", "globals; colspan; rowspan; headers"),
    "textarea": ("text", "globals; autofocus; cols; dirname; disabled; form; maxlength; name; placeholder; readonly; required; rows; wrap"),
    "tfoot": ("tr", "globals"),
    "th": ("flow*", "globals; colspan; rowspan; headers; scope; abbr"),
    "thead": ("tr", "globals"),
    "time": ("phrasing", "globals; datetime"),
    "title": ("text*", "globals"),
    "tr": ("th*; td", "globals"),
    "track": ("empty", "globals; default; kind; label; src; srclang"),
    "u": ("phrasing", "globals"),
    "ul": ("li", "globals"),
    "var": ("phrasing", "globals"),
    "video": ("source*; transparent*", "globals; src; crossorigin; poster; preload; autoplay; mediagroup; loop; muted; controls; width; height"),
    "wbr": ("empty", "globals"),
}

# --- Content categories: category -> elements ---
ELEMENT_CATEGORIES: Dict[str, str] = {
    "metadata": "base; link; meta; noscript; script; style; title",
    "flow": (
        "a; abbr; address; article; aside; audio; b; bdi; bdo; blockquote; br; button; canvas; cite; "
        "code; data; datalist; del; details; dfn; dialog; div; dl; em; embed; fieldset; figure; footer; "
        "form; h1; h2; h3; h4; h5; h6; header; hr; i; iframe; img; input; ins; kbd; keygen; label; main; "
        "map; mark; math; menu; meter; nav; noscript; object; ol; output; p; pre; progress; q; ruby; s; "
        "samp; script; section; select; small; span; strong; sub; sup; svg; table; textarea; time; u; "
        "ul; var; video; wbr; Text"
    ),
    "sectioning": "article; aside; nav; section",
    "heading": "h1; h2; h3; h4; h5; h6",
    "phrasing": (
        "a; abbr; audio; b; bdi; bdo; br; button; canvas; cite; code; data; datalist; del; dfn; em; "
        "embed; i; iframe; img; input; ins; kbd; keygen; label; map; mark; math; meter; noscript; "
        "object; output; progress; q; ruby; s; samp; script; select; small; span; strong; sub; sup; "
        "svg; textarea; time; u; var; video; wbr; Text"
    ),
    "embedded": "audio; canvas; embed; iframe; img; math; object; svg; video",
    "interactive": "a; button; details; embed; iframe; keygen; label; select; textarea",
    "sectioning roots": "blockquote; body; details; dialog; fieldset; figure; td",
    "form-associated": "button; fieldset; input; keygen; label; object; output; select; textarea",
    "listed": "button; fieldset; input; keygen; object; output; select; textarea",
    "submittable": "button; input; keygen; object; select; textarea",
    "resettable": "input; keygen; output; select; textarea",
    "labelable": "button; input; keygen; meter; output; progress; select; textarea",
    "palpable": (
        "a; abbr; address; article; aside; b; bdi; bdo; blockquote; button; canvas; cite; code; data; "
        "details; dfn; div; em; embed; fieldset; figure; footer; form; h1; h2; h3; h4; h5; h6; header; "
        "i; iframe; img; ins; kbd; keygen; label; map; mark; math; meter; nav; object; output; p; pre; "
        "progress; q; ruby; s; samp; section; select; small; span; strong; sub; sup; svg; table; "
        "textarea; time; u; var; video"
    ),
}

# --- Attributes allowed on every element ---
GLOBAL_ATTRIBUTES: Tuple[Matcher, ...] = (
    # primary
    "accesskey",
    "class",
    "contenteditable",
    "contextmenu",
    "dir",
    "draggable",
    "dropzone",
    "hidden",
    "id",
    "inert",
    "itemid",
    "itemprop",
    "itemref",
    "itemscope",
    "itemtype",
    "lang",
    "spellcheck",
    "style",
    "tabindex",
    "title",
    "translate",
    # additional
    "role",
    re.compile(r"^aria-[a-z\-]+"),
    re.compile(r"^data-[a-z\-]+"),
    re.compile(r"^on[a-z\-]+"),
)

# --- Elements that are obsolete and no longer allowed ---
OBSOLETE_ELEMENTS: FrozenSet[str] = frozenset({
    "applet",
    "acronym",
    "bgsound",
    "dir",
    "frame",
    "frameset",
    "noframes",
    "hgroup",
    "isindex",
    "listing",
    "nextid",
    "noembed",
    "plaintext",
    "rb",
    "strike",
    "xmp",
    "basefont",
    "big",
    "blink",
    "center",
    "font",
    "marquee",
    "multicol",
    "nobr",
    "spacer",
    "tt",
})

# --- Attributes that are obsolete on certain elements: (attribute, elements) ---
OBSOLETE_ATTRIBUTES: Tuple[Tuple[str, str], ...] = (
    ("charset", "a"),
    ("charset", "link"),
    ("coords", "a"),
    ("shape", "a"),
    ("methods", "a"),
    ("methods", "link"),
    ("name", "a"),
    ("name", "embed"),
    ("name", "img"),
    ("name", "option"),
    ("rev", "a"),
    ("rev", "link"),
    ("urn", "a"),
    ("urn", "link"),
    ("accept", "form"),
    ("nohref", "area"),
    ("profile", "head"),
    ("version", "html"),
    ("ismap", "input"),
    ("usemap", "input"),
    ("longdesc", "iframe"),
    ("longdesc", "img"),
    ("lowsrc", "img"),
    ("target", "link"),
    ("scheme", "meta"),
    ("archive", "object"),
    ("classid", "object"),
    ("code", "object"),
    ("codebase", "object"),
    ("codetype", "object"),
    ("declare", "object"),
    ("standby", "object"),
    ("type", "param"),
    ("valuetype", "param"),
    ("language", "script"),
    ("event", "script"),
    ("for", "script"),
    ("datapagesize", "table"),
    ("summary", "table"),
    ("axis", "td; th"),
    ("scope", "td"),
    ("datasrc", "a; applet; button; div; frame; iframe; img; input; label; legend; marquee; object; option; select; span; table; textarea"),
    ("datafld", "a; applet; button; div; fieldset; frame; iframe; img; input; label; legend; marquee; object; param; select; span; textarea"),
    ("dataformatas", "button; div; input; label; legend; marquee; object; option; select; span; table"),
    ("alink", "body"),
    ("bgcolor", "body"),
    ("link", "body"),
    ("marginbottom", "body"),
    ("marginheight", "body"),
    ("marginleft", "body"),
    ("marginright", "body"),
    ("margintop", "body"),
    ("marginwidth", "body"),
    ("text", "body"),
    ("vlink", "body"),
    ("clear", "br"),
    ("align", "caption"),
    ("align", "col"),
    ("char", "col"),
    ("charoff", "col"),
    ("valign", "col"),
    ("width", "col"),
    ("align", "div"),
    ("compact", "dl"),
    ("align", "embed"),
    ("hspace", "embed"),
    ("vspace", "embed"),
    ("align", "hr"),
    ("color", "hr"),
    ("noshade", "hr"),
    ("size", "hr"),
    ("width", "hr"),
    ("align", "h1; h2; h3; h4; h5; h6"),
    ("align", "iframe"),
    ("allowtransparency", "iframe"),
    ("frameborder", "iframe"),
    ("hspace", "iframe"),
    ("marginheight", "iframe"),
    ("marginwidth", "iframe"),
    ("scrolling", "iframe"),
    ("vspace", "iframe"),
    ("align", "input"),
    ("hspace", "input"),
    ("vspace", "input"),
    ("align", "img"),
    ("border", "img"),
    ("hspace", "img"),
    ("vspace", "img"),
    ("align", "legend"),
    ("type", "li"),
    ("compact", "menu"),
    ("align", "object"),
    ("border", "object"),
    ("hspace", "object"),
    ("vspace", "object"),
    ("compact", "ol"),
    ("align", "p"),
    ("width", "pre"),
    ("align", "table"),
    ("bgcolor", "table"),
    ("cellpadding", "table"),
    ("cellspacing", "table"),
    ("frame", "table"),
    ("rules", "table"),
    ("width", "table"),
    ("align", "tbody; thead; tfoot"),
    ("char", "tbody; thead; tfoot"),
    ("charoff", "tbody; thead; tfoot"),
    ("valign", "tbody; thead; tfoot"),
    ("align", "td; th"),
    ("bgcolor", "td; th"),
    ("char", "td; th"),
    ("charoff", "td; th"),
    ("height", "td; th"),
    ("nowrap", "td; th"),
    ("valign", "td; th"),
    ("width", "td; th"),
    ("align", "tr"),
    ("bgcolor", "tr"),
    ("char", "tr"),
    ("charoff", "tr"),
    ("valign", "tr"),
    ("compact", "ul"),
    ("type", "ul"),
    ("background", "body; table; thead; tbody; tfoot; tr; td; th"),
)

# --- Attributes required on particular elements: (element, attributes) ---
# http://www.w3.org/TR/html4/index/attributes.html
# http://www.w3.org/TR/html5-diff/#changed-attributes
REQUIRED_ATTRIBUTES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("area", ("alt",)),
    ("applet", ("height", "width")),
    ("bdo", ("dir",)),
    ("form", ("action",)),
    ("img", ("alt", "src")),
    ("map", ("name",)),
    ("optgroup", ("label",)),
    ("param", ("name",)),
    ("textarea", ("cols", "rows")),
)


def split_list(value: str) -> List[str]:
    """Splits a ';'-separated table entry into clean names, dropping '*' markers."""
    return [item for item in re.split(r"\s*;\s*", value.replace("*", "").strip()) if item]
