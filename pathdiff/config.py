import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Bool, HasTraits, List, Unicode, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import PathParseError
from .parsing import parse_path_matcher


class PathdiffConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('pathdiff_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, PathdiffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class PatternList(List):
    """List of path pattern strings, checked by parsing them."""

    def __init__(self, default_value=None, **kwargs):
        super(PatternList, self).__init__(
            trait=Unicode(),
            default_value=default_value if default_value is not None else [],
            **kwargs)

    def validate_elements(self, obj, value):
        value = super(PatternList, self).validate_elements(obj, value)
        for pattern in value:
            try:
                parse_path_matcher(pattern)
            except PathParseError as e:
                raise TraitError('invalid path pattern %r: %s' % (pattern, e))
        return value


class Global(PathdiffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Diff(Global):

    include_objects = Bool(
        False,
        help="report dicts and lists that appear or disappear as changes "
             "of their own, in addition to their leaves.",
    ).tag(config=True)

    ignore = PatternList(
        help="path patterns to leave out of diffs, with all values below them.",
    ).tag(config=True)


class Find(Global):

    first = Bool(
        False,
        help="only report the first match.",
    ).tag(config=True)


class Project(Global):

    include = PatternList(
        help="path patterns to keep; everything else is dropped.",
    ).tag(config=True)

    exclude = PatternList(
        help="path patterns to drop.",
    ).tag(config=True)


entrypoint_configurables = {
    'pathdiff-diff': Diff,
    'pathdiff-find': Find,
    'pathdiff-project': Project,
}
