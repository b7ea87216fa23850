"""
inflector
~~~~~~~~~
The inflector package - English noun inflection (singular and plural)
and identifier casing (camel, underscore, title, ...) for Python.
"""

import inflector.rules as rules
import inflector.store as store
from inflector.inflection import apply_rules as apply_rules
from inflector.inflection import camelize as camelize
from inflector.inflection import capitalize as capitalize
from inflector.inflection import classify as classify
from inflector.inflection import dasherize as dasherize
from inflector.inflection import decapitalize as decapitalize
from inflector.inflection import demodulize as demodulize
from inflector.inflection import foreign_key as foreign_key
from inflector.inflection import humanize as humanize
from inflector.inflection import ordinalize as ordinalize
from inflector.inflection import pluralize as pluralize
from inflector.inflection import singularize as singularize
from inflector.inflection import tableize as tableize
from inflector.inflection import titleize as titleize
from inflector.inflection import underscore as underscore
