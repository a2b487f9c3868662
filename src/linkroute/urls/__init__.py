"""URLs — decomposition of incoming URLs into routable requests.

Split a raw URL into scheme, path components and query parameters, and
normalize the values that end up in a route's parameter mapping.
"""
