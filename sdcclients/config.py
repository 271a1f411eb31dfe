#
# MIT License
#
# (C) Copyright 2026 Hewlett Packard Enterprise Development LP
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR
# OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE,
# ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
"""
Functions for loading and querying the sdc-clients configuration file.
"""
from collections import namedtuple
import logging
import os

import toml

DEFAULT_CONFIG_PATH = f'{os.getenv("HOME", "/root")}/.config/sdc-clients/sdc-clients.toml'
DEFAULT_LOG_PATH = f'{os.getenv("HOME", "/root")}/.cache/sdc-clients/sdc-clients.log'
CONFIG_FILE_ENV_VAR = 'SDC_CLIENTS_CONFIG_FILE'
LOGGER = logging.getLogger(__name__)
CONFIG = None

OptionSpec = namedtuple('OptionSpec', ['type', 'default', 'validation_func', 'cmdline_arg'])


class ConfigValidationError(Exception):
    """An error occurred during validation of configuration."""
    pass


def validate_log_level(level):
    """Validates the given log level.

    Args:
        level (str): The log level string to validate.

    Returns:
        None

    Raises:
        ConfigValidationError: If the given `level` is not valid.
    """
    valid_log_levels = ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']
    if level.upper() not in valid_log_levels:
        raise ConfigValidationError(
            "Level '{}' is not one of the valid log levels: {}".format(
                level, ", ".join(valid_log_levels)
            )
        )


def validate_positive(value):
    """Validates that a numeric option is greater than zero.

    Raises:
        ConfigValidationError: If `value` is zero or negative.
    """
    if value <= 0:
        raise ConfigValidationError(f'Value {value} must be greater than zero.')


def validate_url(url):
    """Validates that a URL option, if set, names an http or https endpoint.

    An empty string means the option is unset and is accepted.

    Raises:
        ConfigValidationError: If `url` has some other scheme.
    """
    if url and not url.startswith(('http://', 'https://')):
        raise ConfigValidationError(f"URL '{url}' must begin with http:// or https://.")


SDC_CONFIG_SPEC = {
    'cloudapi': {
        'url': OptionSpec(str, '', validate_url, 'url'),
        'account': OptionSpec(str, 'my', None, 'account'),
        'version': OptionSpec(str, '6.1.0', None, None),
        'username': OptionSpec(str, '', None, 'username'),
        'password': OptionSpec(str, '', None, None),
        'key_id': OptionSpec(str, '', None, 'key_id'),
        'key_file': OptionSpec(str, '', None, 'key_file'),
        'no_cache': OptionSpec(bool, False, None, 'no_cache'),
        'cache_size': OptionSpec(int, 1000, validate_positive, None),
        'cache_expiry': OptionSpec(int, 60, validate_positive, None),
    },
    'papi': {
        'url': OptionSpec(str, '', validate_url, 'papi_url'),
    },
    'config_service': {
        'url': OptionSpec(str, '', validate_url, 'config_service_url'),
    },
    'http': {
        'cert_verify': OptionSpec(bool, True, None, None),
        'timeout': OptionSpec(int, 60, validate_positive, None),
        'retries': OptionSpec(int, 5, None, None),
        'backoff': OptionSpec(float, 0.2, None, None),
    },
    'logging': {
        'file_name': OptionSpec(str, DEFAULT_LOG_PATH, None, 'logfile'),
        'file_level': OptionSpec(str, 'INFO', validate_log_level, 'loglevel'),
        'stderr_level': OptionSpec(str, 'WARNING', validate_log_level, 'loglevel'),
    },
}


def _option_value(args, curr, spec):
    """Determine the value of an option.

    A value given on the command line wins over a value from the
    configuration file, which wins over the OptionSpec default. A callable
    default is called with no arguments to produce the value.

    Args:
        args: a Namespace from an ArgumentParser, or None.
        curr: the current value (or None if not set) of some option.
        spec: an OptionSpec for the option.
    """

    if spec.cmdline_arg:
        # Override with command-line value if specified
        args_value = getattr(args, spec.cmdline_arg, None)
        if args_value is not None:
            return args_value

    default = spec.default() if callable(spec.default) else spec.default

    return default if curr is None else curr


class SDCConfig:
    """The configuration of the sdc-clients library and command.

    Loads the configuration from a TOML file, fills in defaults for missing
    values, and validates every option against SDC_CONFIG_SPEC.
    """

    def __init__(self, config_file_path, args=None):
        """Create the SDCConfig object and load values from the given file path

        Args:
            config_file_path: The path to the config file in TOML format.
            args: a Namespace object returned by an ArgumentParser, used
                to override config values to values supplied on the command
                line.
        """

        self.sections = {}

        config_contents = None
        if config_file_path:
            try:
                with open(config_file_path) as config_file:
                    config_contents = toml.load(config_file)
            except IOError as ioerr:
                LOGGER.debug("Couldn't open config file %s; using defaults. (%s)",
                             config_file_path, ioerr)
            except toml.TomlDecodeError as err:
                LOGGER.error("Unable to parse config file at '%s': %s. Using default "
                             "configuration values.", config_file_path, err)

        if config_contents and isinstance(config_contents, dict):
            self.sections.update(config_contents)

        for section, options in SDC_CONFIG_SPEC.items():
            if section not in self.sections:
                self.sections[section] = {option: _option_value(args, None, spec)
                                          for option, spec in options.items()}
            else:
                for option, spec in options.items():
                    self.sections[section][option] = \
                        _option_value(args, self.sections[section].get(option), spec)

        self._validate_config()

    def _validate_config(self):
        """Validates the configuration values according to SDC_CONFIG_SPEC.

        Values of the wrong type or failing their validation function are
        logged and replaced with their defaults. Unknown sections and options
        are logged and removed.

        Returns:
            None
        """
        unknown_sections = []
        for section, options in self.sections.items():
            if section not in SDC_CONFIG_SPEC:
                LOGGER.warning("Ignoring unknown section '%s' in config file.",
                               section)
                unknown_sections.append(section)
                continue

            unknown_options = []
            for option, value in options.items():
                if option not in SDC_CONFIG_SPEC[section]:
                    LOGGER.warning("Ignoring unknown option '%s' in section '%s' "
                                   "of config file.", option, section)
                    unknown_options.append(option)
                    continue

                option_spec = SDC_CONFIG_SPEC[section][option]
                try:
                    converted_value = option_spec.type(value)
                except (TypeError, ValueError):
                    LOGGER.error("Unable to convert value (%s) of option '%s' in section '%s' of "
                                 "config file to the type '%s'. Defaulting to '%s'.",
                                 value, option, section, option_spec.type, option_spec.default)
                    self.sections[section][option] = option_spec.default
                    continue

                try:
                    if option_spec.validation_func is not None:
                        option_spec.validation_func(converted_value)
                except ConfigValidationError as err:
                    LOGGER.error("Invalid value '%s' given for option '%s' in section '%s': %s "
                                 "Defaulting to '%s'.",
                                 converted_value, option, section, err, option_spec.default)
                    self.sections[section][option] = option_spec.default
                    continue

                self.sections[section][option] = converted_value

            for unknown_option in unknown_options:
                del self.sections[section][unknown_option]

        for unknown_section in unknown_sections:
            del self.sections[unknown_section]

    def get(self, section, option):
        """Gets the value of the option in the given section.

        Args:
            section: The section in the config file.
            option: The option in the config file.

        Returns:
            The value of the given `option` in the given `section`.

        Raises:
            KeyError: if the section or option does not exist.
        """
        if section not in self.sections:
            raise KeyError("Couldn't find section {} in config.".format(section))
        elif option not in self.sections[section]:
            raise KeyError("Couldn't find option {} in section {}.".format(option, section))
        else:
            return self.sections[section][option]


def get_config_file_path():
    """Get the path of the config file, honoring $SDC_CLIENTS_CONFIG_FILE."""
    return os.getenv(CONFIG_FILE_ENV_VAR, DEFAULT_CONFIG_PATH)


def load_config(args=None):
    """Loads configuration from a config file into CONFIG global variable.

    Returns:
        None
    """
    global CONFIG

    # Only load the configuration once per process.
    if CONFIG is not None:
        return

    CONFIG = SDCConfig(get_config_file_path(), args)


def get_config_value(query_string):
    """Loads config (if necessary) and gets option value.

    Args:
        query_string (str): A dot-delimited reference to a section and option from
            the configuration. query_string should be in the form '<section>.<option>'.

    Returns:
        The requested option from the global CONFIG object.

    Raises:
        ValueError: if `query_string` is not of the form '<section>.<option>'.
    """
    load_config()

    expected_levels = 2
    parts = query_string.split('.')
    if len(parts) != expected_levels:
        raise ValueError("Wrong number of levels in query string passed to get_config_value(). "
                         "(Should be {}, was {}.)".format(expected_levels, len(parts)))

    section, option = parts
    if not section or not option:
        raise ValueError("Improperly formatted query string supplied to get_config_value(). "
                         "(Got '{}'.)".format(query_string))
    return CONFIG.get(section, option)
