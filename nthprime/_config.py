import os
import platform
from pathlib import Path

import yaml

CONFIG_DIRNAME = 'NthPrime'
CONFIG_FILENAME = 'config.yml'


def load_config(path):
    return yaml.load(path.read_text(), Loader=yaml.FullLoader)


def config_dir():
    if platform.system() in ['Darwin', 'Linux']:
        home = os.getenv('HOME')
    elif platform.system() == 'Windows':
        home = os.getenv('ProgramData')
    else:
        home = Path.home()
    return Path(home) / CONFIG_DIRNAME


def config_file():
    return config_dir() / CONFIG_FILENAME


def default_config():
    return {
        'log': {
            'level': 'info',
        },
        'sieve': {
            'memory_limit': 1 << 30,
            'growth': 1.5,
            'block_bits': 1 << 23,
        },
    }  # yapf : disable


def merge_config(cfg, defaults=None):
    """
    Fill the keys missing from cfg with the values of defaults.
    """
    if defaults is None:
        defaults = default_config()
    ret = dict(defaults)
    for key, value in (cfg or {}).items():
        if isinstance(value, dict) and isinstance(defaults.get(key), dict):
            ret[key] = merge_config(value, defaults[key])
        else:
            ret[key] = value
    return ret


def create_config_file():
    config_dir().mkdir(parents=True, exist_ok=True)
    config_file().write_text(yaml.dump(default_config()))


if config_file().exists():
    config = merge_config(load_config(config_file()))
else:
    config = default_config()
