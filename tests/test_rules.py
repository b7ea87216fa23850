import unittest

from inflector import rules
from inflector.inflection import apply_rules

CORPUS = [
    "man", "woman", "person", "child", "ox", "axis", "octopus", "virus",
    "alias", "status", "bus", "tomato", "datum", "analysis", "knife", "wolf",
    "hive", "query", "box", "church", "kiss", "dish", "mouse", "quiz", "Hat",
    "men", "people", "children", "oxen", "octopi", "crises", "buses", "hives",
    "knives", "wolves", "queries", "boxes", "mice", "tomatoes", "quizzes",
    "indices", "matrices", "data", "Hats", "sheep", "",
]


class InflectionRuleTest(unittest.TestCase):

    def test_case_insensitive(self):
        rule = rules.InflectionRule.of(r"(pe)rson$", r"\1ople")

        self.assertTrue(rule.matches("PERSON"))
        self.assertEqual("People", rule.apply("Person"))

    def test_unmatched_group_is_empty(self):
        rule = rules.InflectionRule.of(r"(?:([^f])fe|([lr])f)$", r"\1\2ves")

        self.assertEqual("knives", rule.apply("knife"))
        self.assertEqual("wolves", rule.apply("wolf"))

    def test_frozen(self):
        rule = rules.PLURAL_RULES[0]

        with self.assertRaises(AttributeError):
            rule.replacement = "x"


class RuleTableTest(unittest.TestCase):

    def test_declared_order(self):
        self.assertEqual(len(rules.PLURAL_RULE_SOURCES), len(rules.PLURAL_RULES))
        self.assertEqual(len(rules.SINGULAR_RULE_SOURCES), len(rules.SINGULAR_RULES))

        self.assertEqual(
            [pattern for pattern, _ in rules.PLURAL_RULE_SOURCES],
            [rule.pattern.pattern for rule in rules.PLURAL_RULES]
        )

        self.assertEqual(r"(m)an\Z", rules.PLURAL_RULES[0].pattern.pattern)
        self.assertEqual(r"(m)en\Z", rules.SINGULAR_RULES[0].pattern.pattern)

    def test_immutable(self):
        self.assertIsInstance(rules.PLURAL_RULES, tuple)
        self.assertIsInstance(rules.SINGULAR_RULES, tuple)
        self.assertIsInstance(rules.UNCOUNTABLE_WORDS, frozenset)
        self.assertIsInstance(rules.NON_TITLECASED_WORDS, frozenset)

    def test_plural_fallback_matches_everything(self):
        fallback = rules.PLURAL_RULES[-1]

        for word in ["", "cow", "Hat", "123", "x y"]:
            self.assertTrue(fallback.matches(word), word)
            self.assertEqual(word + "s", fallback.apply(word))

    def test_singular_fallback_strips_trailing_s(self):
        fallback = rules.SINGULAR_RULES[-1]

        self.assertEqual("cow", fallback.apply("cows"))
        self.assertEqual("Hat", fallback.apply("HatS"))
        self.assertFalse(fallback.matches("cow"))

    def test_rebuild_is_deterministic(self):
        tables = [
            (rules.build_plural_rules(), rules.build_singular_rules())
            for _ in range(2)
        ]

        for word in CORPUS:
            outputs = {
                (apply_rules(word, plural_rules), apply_rules(word, singular_rules))
                for plural_rules, singular_rules in tables
            }

            self.assertEqual(1, len(outputs), word)

    def test_rebuild_matches_constants(self):
        for word in CORPUS:
            self.assertEqual(
                apply_rules(word, rules.PLURAL_RULES),
                apply_rules(word, rules.build_plural_rules())
            )

            self.assertEqual(
                apply_rules(word, rules.SINGULAR_RULES),
                apply_rules(word, rules.build_singular_rules())
            )


class WordListTest(unittest.TestCase):

    def test_uncountable_words(self):
        self.assertEqual(
            {"equipment", "information", "rice", "money", "species", "series", "fish", "sheep", "moose", "deer", "news"},
            rules.UNCOUNTABLE_WORDS
        )

    def test_non_titlecased_words(self):
        self.assertEqual(
            {"and", "or", "nor", "a", "an", "the", "so", "but", "to", "of", "at", "by", "from", "into", "on", "onto", "off", "out", "in", "over", "with", "for"},
            rules.NON_TITLECASED_WORDS
        )


class StructuralExpressionsTest(unittest.TestCase):

    def test_id_suffix(self):
        self.assertEqual("author", rules.ID_SUFFIX.sub("", "author_id"))
        self.assertEqual("author", rules.ID_SUFFIX.sub("", "author_ids"))
        self.assertEqual("identity", rules.ID_SUFFIX.sub("", "identity"))

    def test_uppercase(self):
        self.assertEqual("_Message_Bus", rules.UPPERCASE.sub(r"_\1", "MessageBus"))

    def test_space_or_underbar(self):
        self.assertEqual("a-b-c", rules.SPACE_OR_UNDERBAR.sub("-", "a b_c"))

    def test_anchored_at_end_of_string(self):
        self.assertEqual("author_id\n", rules.ID_SUFFIX.sub("", "author_id\n"))

        for rule in rules.PLURAL_RULES + rules.SINGULAR_RULES:
            self.assertNotIn("$", rule.pattern.pattern, rule)

    def test_repr(self):
        self.assertEqual(r"InflectionRule((pe)ople\Z -> \1rson)", repr(rules.SINGULAR_RULES[1]))
