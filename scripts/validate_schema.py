#!/usr/bin/env python3
"""Validate the definitions in one or more OpenLDAP-style .schema files and print a diagnostic for each rejected one"""
import argparse
import sys

from ldapdefs import config
from ldapdefs.parser import DefinitionParser
from ldapdefs.schemafile import validate_schema_file


def main(argv=None):
    argparser = argparse.ArgumentParser(description=__doc__)
    argparser.add_argument('files', nargs='+', metavar='FILE', help='schema files to validate')
    argparser.add_argument('-c', '--config', help='YAML or JSON config file')
    argparser.add_argument('--allow-malformed-names', action='store_true', default=None,
                           help='accept descriptors as OIDs and tolerate underscores in names')
    args = argparser.parse_args(argv)

    if args.config:
        config.load_file(args.config)
    DefinitionParser.log_warnings()
    parser = DefinitionParser(allow_malformed_names=args.allow_malformed_names)

    failed = 0
    for path in args.files:
        for attr, definition, reason in validate_schema_file(path, parser):
            print('{0}: {1}: {2}'.format(path, attr, reason))
            failed += 1
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
