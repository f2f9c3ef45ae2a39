#: Project name.
name = 'sysroute'
abstract = 'validated filesystem path values with component algebra'

#: IRI based project identity.
identity = 'urn:python-package:' + name

#: Version tuple: (major, minor, patch)
version_info = (0, 1, 0)

#: The version string.
version = '.'.join(map(str, version_info))
