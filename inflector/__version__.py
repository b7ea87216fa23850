__title__ = 'inflector-cli'
__description__ = 'English noun inflection and identifier casing, from the library or the command line.'
__version__ = '1.0.0'
__author__ = 'Inflector Authors'
__author_email__ = 'inflector@users.noreply.github.com'
__url__ = 'https://github.com/inflector-cli/inflector-cli'
