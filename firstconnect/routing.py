# firstconnect/routing.py
from django.urls import path


def slash_optional(route, view, name=None):
    """
    Patterns for route with and without its trailing slash. Only the slash
    form is named, so reverse() keeps producing it.
    """
    patterns = [path(route, view, name=name)]
    bare = route.rstrip('/')
    if bare and bare != route:
        patterns.append(path(bare, view))
    return patterns
