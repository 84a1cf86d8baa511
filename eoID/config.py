# -*- coding: utf-8 -*-
###############################################################################
# eoID configuration handling

# Copyright (c) 2026, the eoID Developers.

# This file is part of the eoID Project. It is subject to the
# license terms in the LICENSE.txt file found in the top-level
# directory of this distribution.
# No part of the eoID project, including this file, may be
# copied, modified, propagated, or distributed except according
# to the terms contained in the LICENSE.txt file.
###############################################################################
import os
import json

import configparser as ConfigParser


class Singleton(type):
    """
    Define an Instance operation that lets clients access its unique instance.
    https://sourcemaking.com/design_patterns/singleton/python/1
    """

    def __init__(cls, name, bases, attrs, **kwargs):
        super().__init__(name, bases, attrs)
        cls._instance = None

    def __call__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__call__(*args, **kwargs)
        return cls._instance


class ConfigHandler(metaclass=Singleton):
    """
    ConfigHandler is the configuration handler of eoID. It reads the file config.ini in directory .eoid
    of the user home directory, which is created if it does not yet exist.

    ConfigHandler is a SINGLETON, meaning once instantiated, THE SAME OBJECT
    will be returned to every caller.

    Currently the following options are evaluated:

    * section IDENTIFY, option conventions: a JSON list of the names of the naming conventions
      registered by :func:`~eoID.drivers.default_dispatcher`, e.g. ["sentinel2", "landsat"]

    Methods
    -------
    add_section : Create a new section in the configuration.
    set : Set an option in the configuration.
    remove_option : Remove an option in the configuration.
    remove_section : Remove a section from the configuration.

    Notes
    -----
    The syntax is the same as in ConfigParser. Here, keys are called options.

    Examples
    --------
    >>> from eoID.config import ConfigHandler
    >>> config = ConfigHandler()
    >>> config.add_section('IDENTIFY')
    >>> config.set('IDENTIFY', 'conventions', ['sentinel1', 'sentinel2'])
    """

    def __init__(self):
        path = os.path.join(os.path.expanduser('~'), '.eoid')

        self.__GLOBAL = {
            'path': path,
            'config': os.path.join(path, 'config.ini'),
        }

        if not os.path.isfile(self.__GLOBAL['config']):
            self.__create_config()

        self.parser = ConfigParser.RawConfigParser(allow_no_value=True)
        self.parser.optionxform = str
        self.parser.read(self.__GLOBAL['config'])

    def __create_config(self):
        os.makedirs(self.__GLOBAL['path'], exist_ok=True)
        with open(self.__GLOBAL['config'], 'w'):
            pass

    def __str__(self):
        items = []
        for section in self.parser.sections():
            items.append('  Section: {0}\n'.format(section))

            for options in self.parser.options(section):
                items.append('    x {0} :: {1}\n'
                             .format(options, self.parser.get(section, options)))
        out = f'Class    : {self.__class__.__name__}\n' \
              f'Path     : {self.__GLOBAL["config"]}\n' \
              f'Sections : {len(self.parser.sections())}\n' \
              f'Contents : \n{"".join(items)}'

        return out

    def __getitem__(self, section):
        if not self.parser.has_section(section):
            raise AttributeError('Section {0} does not exist.'.format(str(section)))
        return dict(self.parser.items(section))

    @property
    def sections(self):
        return self.parser.sections()

    @property
    def file(self):
        return self.__GLOBAL['config']

    def get(self, section, key, default=None):
        """
        Get the value of an option.

        Parameters
        ----------
        section : str
            Section name.
        key : str
            the attribute name
        default :
            the value returned if the section or option does not exist

        Returns
        -------
        str or None
        """
        if not self.parser.has_option(section, key):
            return default
        return self.parser.get(section, key)

    def getlist(self, section, key, default=None):
        """
        Get the value of an option stored as JSON list via :meth:`set`.

        Parameters
        ----------
        section : str
            Section name.
        key : str
            the attribute name
        default :
            the value returned if the section or option does not exist

        Returns
        -------
        list or None

        Raises
        ------
        ValueError
            if the value is not a JSON list
        """
        value = self.get(section, key)
        if value is None:
            return default
        try:
            out = json.loads(value)
        except json.JSONDecodeError:
            out = None
        if not isinstance(out, list):
            raise ValueError('option {0} of section {1} must be a JSON list, got {2!r}'
                             .format(key, section, value))
        return out

    def add_section(self, section):
        """
        Create a new section in the configuration.

        Parameters
        ----------
        section : str
            Section name

        Returns
        -------
        None
        """
        if not self.parser.has_section(section):
            self.parser.add_section(section)
            self.write()
        else:
            raise RuntimeError('section already exists')

    def set(self, section, key, value, overwrite=False):
        """
        Set an option. Lists are stored as JSON.

        Parameters
        ----------
        section : str
            Section name.
        key : str
            the attribute name
        value :
            the attribute value
        overwrite : bool
            If True and the defined key exists the value will be overwritten.

        Returns
        -------
        None
        """
        if not self.parser.has_section(section):
            raise AttributeError('Section {0} does not exist.'.format(str(section)))

        if isinstance(value, list):
            value = json.dumps(value)

        if key in self.parser.options(section) and not overwrite:
            raise RuntimeError('Value already exists.')

        self.parser.set(section, key, value)
        self.write()

    def remove_option(self, section, key):
        """
        Remove an option and key.

        Parameters
        ----------
        section : str
            Section name.
        key : str
            Key value.
        """
        if not self.parser.has_section(section):
            raise AttributeError('Section {0} does not exist.'.format(str(section)))

        if key not in self.parser.options(section):
            raise AttributeError('Key {0} does not exist.'.format(str(key)))

        self.parser.remove_option(section, key)
        self.write()

    def remove_section(self, section):
        """
        remove a section

        Parameters
        ----------
        section: str
            Section name.
        """
        self.parser.remove_section(section)
        self.write()

    def write(self):
        with open(self.__GLOBAL['config'], 'w', encoding='utf8') as out:
            self.parser.write(out)
