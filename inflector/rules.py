"""
Rule tables and fixed word lists used by the inflection functions.

Each table is scanned in declared order and the first matching rule wins,
so irregular forms must stay above the generic ones.
"""

import dataclasses
import re
import typing


@dataclasses.dataclass(frozen=True)
class InflectionRule:

    pattern: re.Pattern
    replacement: str

    @classmethod
    def of(cls, pattern: str, replacement: str) -> "InflectionRule":
        return cls(
            pattern=re.compile(pattern, re.IGNORECASE),
            replacement=replacement,
        )

    def matches(self, word: str) -> bool:
        return self.pattern.search(word) is not None

    def apply(self, word: str) -> str:
        return self.pattern.sub(self.replacement, word)

    def __repr__(self):
        return f"InflectionRule({self.pattern.pattern} -> {self.replacement})"


RuleTable = typing.Tuple[InflectionRule, ...]


UNCOUNTABLE_WORDS = frozenset([
    "equipment", "information", "rice", "money", "species", "series",
    "fish", "sheep", "moose", "deer", "news",
])

NON_TITLECASED_WORDS = frozenset([
    "and", "or", "nor", "a", "an", "the", "so", "but", "to", "of", "at",
    "by", "from", "into", "on", "onto", "off", "out", "in", "over",
    "with", "for",
])

# singular -> plural
PLURAL_RULE_SOURCES = [
    (r"(m)an\Z", r"\1en"),
    (r"(pe)rson\Z", r"\1ople"),
    (r"(child)\Z", r"\1ren"),
    (r"^(ox)\Z", r"\1en"),
    (r"(ax|test)is\Z", r"\1es"),
    (r"(octop|vir)us\Z", r"\1i"),
    (r"(alias|status|by)\Z", r"\1es"),
    (r"(bu)s\Z", r"\1ses"),
    (r"(buffal|tomat|potat)o\Z", r"\1oes"),
    (r"([ti])um\Z", r"\1a"),
    (r"sis\Z", r"ses"),
    (r"(?:([^f])fe|([lr])f)\Z", r"\1\2ves"),
    (r"(hive)\Z", r"\1s"),
    (r"([^aeiouy]|qu)y\Z", r"\1ies"),
    (r"(x|ch|ss|sh)\Z", r"\1es"),
    (r"(matr|vert|ind)ix|ex\Z", r"\1ices"),
    (r"([m|l])ouse\Z", r"\1ice"),
    (r"(quiz)\Z", r"\1zes"),
    (r"s\Z", r"s"),
    (r"\Z", r"s"),
]

# plural -> singular
SINGULAR_RULE_SOURCES = [
    (r"(m)en\Z", r"\1an"),
    (r"(pe)ople\Z", r"\1rson"),
    (r"(child)ren\Z", r"\1"),
    (r"([ti])a\Z", r"\1um"),
    (r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)ses\Z", r"\1\2sis"),
    (r"(hive)s\Z", r"\1"),
    (r"(tive)s\Z", r"\1"),
    (r"(curve)s\Z", r"\1"),
    (r"([lr])ves\Z", r"\1f"),
    (r"([^fo])ves\Z", r"\1fe"),
    (r"([^aeiouy]|qu)ies\Z", r"\1y"),
    (r"(s)eries\Z", r"\1eries"),
    (r"(m)ovies\Z", r"\1ovie"),
    (r"(x|ch|ss|sh)es\Z", r"\1"),
    (r"([m|l])ice\Z", r"\1ouse"),
    (r"(bus)es\Z", r"\1"),
    (r"(o)es\Z", r"\1"),
    (r"(shoe)s\Z", r"\1"),
    (r"(cris|ax|test)es\Z", r"\1is"),
    (r"(octop|vir)i\Z", r"\1us"),
    (r"(alias|status)es\Z", r"\1"),
    (r"^(ox)en", r"\1"),
    (r"(vert|ind)ices\Z", r"\1ex"),
    (r"(matr)ices\Z", r"\1ix"),
    (r"(quiz)zes\Z", r"\1"),
    (r"s\Z", r""),
]


def build_rules(sources: typing.Iterable[typing.Tuple[str, str]]) -> RuleTable:
    return tuple(
        InflectionRule.of(pattern, replacement)
        for pattern, replacement in sources
    )


def build_plural_rules() -> RuleTable:
    return build_rules(PLURAL_RULE_SOURCES)


def build_singular_rules() -> RuleTable:
    return build_rules(SINGULAR_RULE_SOURCES)


PLURAL_RULES = build_plural_rules()
SINGULAR_RULES = build_singular_rules()

ID_SUFFIX = re.compile(r"(_ids|_id)\Z")
UNDERBAR = re.compile(r"_")
SPACE_OR_UNDERBAR = re.compile(r"[ _]")
UPPERCASE = re.compile(r"([A-Z])")
UNDERBAR_PREFIX = re.compile(r"^_")
