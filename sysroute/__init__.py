"""
# Validated path strings tagged as directories or files by their trailing separator.

# &.types.Path is the value type; &.library provides the well-known locations
# and the library search. Filesystem access is delegated to a &.abstract.Filesystem
# collaborator, &.files.system by default.
"""
