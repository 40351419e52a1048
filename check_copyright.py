#!python3 -X utf8

import sys
import os
import argparse
import logging

##################################################################################################
# Main
##################################################################################################

def add_file_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('paths', type=str, nargs='*', default=['.'],
                        help='Files or directories to check. Defaults to the current directory.')
    parser.add_argument('--exclude', type=str, action='append', default=[],
                        help='Gitignore style pattern of files to leave out. May be repeated.')
    parser.add_argument('--ignore-file', type=str, default='.copyrightignore',
                        help='File with one exclusion pattern per line.')


def main() -> int:
    if sys.platform.lower() == "win32":
        os.system('color')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    logging.basicConfig(level=logging.INFO, format='%(message)s')

    parser = argparse.ArgumentParser(description='Copyright statement enforcement')
    parser.add_argument('--debug', action='store_true', help='Log every git command and file result.')
    subparsers = parser.add_subparsers(dest='command')

    update_parser = subparsers.add_parser('update', help='Check that changed files state the year they were changed in.')
    add_file_arguments(update_parser)

    years_parser = subparsers.add_parser('years', help='List the copyright year each changed file must reach.')
    add_file_arguments(years_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return 0

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        # GitPython logs every process it starts
        logging.getLogger("git.cmd").setLevel(logging.INFO)

    match args.command:
        case 'update':
            from copyguard.tasks.update import update_main
            return 0 if update_main(args.paths, args.exclude, args.ignore_file) else 1

        case 'years':
            from copyguard.tasks.update import years_main
            years_main(args.paths, args.exclude, args.ignore_file)
            return 0

        case _:
            raise ValueError(f"Unknown command: {args.command}")

if __name__ == '__main__':
    sys.exit(main())
