"""Resource name derivation.

Thin wrappers over ``inflection`` producing the two forms a CRUD tree
needs: the plural directory/path name and the camel-cased singular used
for the dynamic instance segment.
"""

import inflection


def plural(word: str) -> str:
    """``"user"`` -> ``"users"``, ``"users"`` -> ``"users"``."""
    return inflection.pluralize(word)


def camel_singular(word: str) -> str:
    """``"blog_posts"`` -> ``"blogPost"``."""
    return inflection.camelize(inflection.singularize(word), uppercase_first_letter=False)


def instance_segment(word: str) -> str:
    """Dynamic path segment addressing one instance: ``"users"`` -> ``":userId"``."""
    return f":{camel_singular(word)}Id"
