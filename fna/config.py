# -*- coding: utf-8 -*-
import os
import socket
import threading
import traceback
from pathlib import Path
from typing import Optional, Union

import yaml

ENV = os.environ.get("env")
HOSTNAME = socket.gethostname()
FILES_IN_ROOT = ('pyproject.toml', 'setup.py', 'requirements.txt', '.git')

_CONFIGS = {}
_CONFIGS_LOCK = threading.Lock()


class Config(object):

    def __init__(self, config_name='config', config_dir=None) -> None:
        super().__init__()
        self.config_name = config_name or 'config'  # force not none
        self.config_dir = config_dir or get_config_dir()
        self.conf = self.read_conf() or {}

    def read_conf(self):
        if self.config_name.endswith('.yml'):
            return self._conf_from(self.config_name)

        qualifier = ENV if ENV is not None else HOSTNAME
        for config_file_name in [f"{self.config_name}-{qualifier}.yml", f"{self.config_name}.yml"]:
            conf = self._conf_from(config_file_name)
            if conf is not None:
                return conf
        return None

    def _conf_from(self, config_file):
        if config_file[0] in ('/', '~', '$'):
            config_file = os.path.expanduser(os.path.expandvars(config_file))
        else:
            config_file = os.path.join(self.config_dir, config_file)

        if not os.path.exists(config_file):
            return None
        with open(config_file, 'rb') as stream:
            try:
                conf = yaml.safe_load(stream)
                print(f"[config] from: {config_file}, loaded")
                return conf or {}
            except yaml.YAMLError as e:
                print(f"[config] failed to load from: {config_file}, due to: {e}")
                traceback.print_exc()
                return {}

    def get(self, name, default_value=None):
        if name is None:
            return default_value
        cfg = self.conf
        for _key in name.split('.'):
            if not isinstance(cfg, dict):
                return default_value
            cfg = cfg.get(_key)
            if cfg is None:
                return default_value
        return cfg


def project_root_path():
    path = Path(os.getcwd())
    while True:
        if any(path.joinpath(f).exists() for f in FILES_IN_ROOT):
            return str(path)
        if path.parent == path:
            return os.getcwd()
        path = path.parent


def get_config_dir():
    config_dir = os.environ.get("CONFIG_DIR")
    if config_dir is not None:
        if not os.path.exists(config_dir):
            print(f'[config] CONFIG_DIR: {config_dir} DOES NOT EXIST, trying from default path')
        else:
            return config_dir
    return os.path.join(project_root_path(), 'conf')


def get_config(config: Optional[Union[str, Config]] = None):
    if isinstance(config, Config):
        return config
    if config is not None and not isinstance(config, str):
        raise ValueError(f'Unsupported cfg type: {type(config)}')
    config_name = config or 'config'
    cfg = _CONFIGS.get(config_name)
    if cfg is None:
        with _CONFIGS_LOCK:
            cfg = _CONFIGS.get(config_name)
            if cfg is None:
                cfg = _CONFIGS[config_name] = Config(config_name)
    return cfg


def get(name, default_value=None, config: Optional[Union[str, Config]] = None):
    return get_config(config).get(name, default_value)
