"""Reserved keys in a route's parameter mapping.

Metadata keys are written last during the merge, so a query parameter or
route variable with the same name never shadows them.
"""

PATTERN_KEY = "pattern"
URL_KEY = "url"
SCHEME_KEY = "scheme"

# Remaining raw path components matched by a "*" segment
WILDCARD_COMPONENTS_KEY = "wildcard_components"

# Scheme served by the global router
GLOBAL_SCHEME = "*"
