"""Apex language plugin."""

MODIFIER = "modifier"
PRIMITIVE = "primitive"
COLLECTION = "collection"

# Leading tokens that mark a scope-less member as implicitly private.
# Modifiers and primitive types only count when the line is a method
# signature; collections need a type parameter as well.
IMPLICIT_PRIVATE_MARKERS: dict[str, frozenset[str]] = {
    MODIFIER: frozenset({"abstract", "final", "virtual", "override"}),
    PRIMITIVE: frozenset({
        "void",
        "blob",
        "boolean",
        "date",
        "datetime",
        "decimal",
        "double",
        "id",
        "integer",
        "long",
        "object",
        "string",
        "time",
    }),
    COLLECTION: frozenset({"list", "set", "map"}),
}

# Words that may precede the class/interface/enum keyword in a type header.
DECLARATION_MODIFIERS = frozenset({
    "global",
    "public",
    "private",
    "protected",
    "abstract",
    "virtual",
    "static",
    "with",
    "without",
    "inherited",
    "sharing",
})

DEFAULT_SCOPES = ["global", "public", "private", "protected", "testmethod", "webservice"]


class ApexLanguage:
    """Apex keyword tables for the line classifier."""

    name = "apex"
    suffixes = [".cls", ".trigger"]
    ignore_dirs = {".sfdx", ".sf", "node_modules", ".localdevserver"}
    declaration_keywords = ("enum", "class", "interface")
    declaration_modifiers = DECLARATION_MODIFIERS
    default_scopes = DEFAULT_SCOPES
    implicit_private_markers = IMPLICIT_PRIVATE_MARKERS
    private_scope = "private"
    test_method_scope = "testmethod"


APEX = ApexLanguage()
