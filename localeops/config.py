import logging
import os

from traitlets import Unicode, Enum, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import init_logging, set_localeops_log_level


CONFIG_FILENAME = 'localeops_config'


class LocaleOpsConfigurable(HasTraits):

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


def config_path():
    """The directories searched for config files, in descending priority."""
    return [os.getcwd(), os.path.join(os.path.expanduser('~'), '.localeops')]


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


def build_config(entrypoint, include_none=False, path=None):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    if path is None:
        path = config_path()
    for c in _load_config_files(CONFIG_FILENAME, path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, LocaleOpsConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


class Global(LocaleOpsConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Storage(LocaleOpsConfigurable):

    database_path = Unicode(
        'localeops.json',
        help="The json file storing the source snapshot of each target locale.",
    ).tag(config=True)


class _Reporting(LocaleOpsConfigurable):

    use_color = Bool(
        True,
        help="Whether to use colors when printing deltas.",
    ).tag(config=True)


class Extract(Global, Storage, _Reporting):
    pass


class Apply(Global, Storage):
    pass


entrypoint_configurables = {
    'extract': Extract,
    'apply': Apply,
}


class Namespace(object):
    def __init__(self, adict):
        self.__dict__.update(adict)


def configure(entrypoint, path=None):
    """Build the config of an entrypoint and set up logging from it.

    Returns the config as a Namespace.
    """
    config = build_config(entrypoint, path=path)
    level = getattr(logging, config['log_level'])
    init_logging(level=level)
    set_localeops_log_level(level)
    return Namespace(config)
