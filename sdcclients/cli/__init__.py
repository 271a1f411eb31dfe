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
The subcommands of the sdc-clients command line interface.

Each subcommand is a subpackage of this package named after the service it
talks to. Its `parser` module defines `add_<subcommand>_subparser` and its
`main` module defines `do_<subcommand>`.
"""
import importlib
import pkgutil


def subcommand_names():
    """Get the sorted names of the subcommand subpackages."""
    return sorted(info.name for info in pkgutil.iter_modules(__path__) if info.ispkg)


def get_subcommand_function(subcommand, module, function_name):
    """Import a function from a module of a subcommand subpackage.

    Args:
        subcommand (str): the name of the subcommand, e.g. 'papi'.
        module (str): 'parser' or 'main'.
        function_name (str): the function to get from the module.

    Returns:
        The function.

    Raises:
        RuntimeError: if the module does not define the function.
    """
    module_path = f'{__name__}.{subcommand}.{module}'
    try:
        return getattr(importlib.import_module(module_path), function_name)
    except AttributeError as err:
        raise RuntimeError(f"Couldn't find function '{module_path}.{function_name}'") from err


def get_subcommand_main(subcommand):
    """Get the `do_<subcommand>` function which runs a subcommand."""
    return get_subcommand_function(subcommand, 'main', f'do_{subcommand}')


def build_out_subparsers(subparsers):
    """Add the parser of each subcommand.

    Args:
        subparsers: the object returned by ArgumentParser.add_subparsers().
    """
    for subcommand in subcommand_names():
        add_subparser = get_subcommand_function(subcommand, 'parser', f'add_{subcommand}_subparser')
        add_subparser(subparsers)
