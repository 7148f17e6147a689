#!/usr/bin/env python3

"""
kconf - A Python utility for managing a library of kubeconfig files
Features:
- Named kubeconfig references kept as symbolic links in one directory
- Selection by alias or by position in the listing
- Activation through an `export KUBECONFIG=...` line for the shell to eval

Usage:
  kconf [-a|-s|-l|-r] [args...]

Options:
  -a FILE [ALIAS]   Add a kubeconfig (alias defaults to the base name
                    up to the first dot)
  -s INDEX|ALIAS    Print the export line that activates a kubeconfig
  -l                List the library, '*' marks the active kubeconfig
  -r INDEX|ALIAS    Remove a kubeconfig from the library (the file is kept)
  --config FILE     Settings file
  --init            Initialize a default settings file in ~/.config/kconf/
  --version         Show the version and exit

Without a switch: no arguments lists, one argument sets, two arguments add.

The library directory is searched in the following order:
1. KCONF_LIBRARY_PATH environment variable
2. library_path in the settings file
3. ~/.kconf
"""

from kconf import run_cli

if __name__ == "__main__":
    run_cli()
