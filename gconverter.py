import sys

from typing import Optional

from graph import MalformedInputError, read_graph, write_graph

def text_to_bin(infile_name: str, outfile_name: str) -> None:
    write_graph(read_graph(infile_name), outfile_name, binary=True)

def bin_to_text(infile_name: str, outfile_name: str) -> None:
    write_graph(read_graph(infile_name, binary=True), outfile_name)

def main(argv: Optional[list[str]]=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)
    parser.add_argument('-r', '--reverse',
                        action='store_true',
                        help='convert binary to text instead of text to binary')

    args = parser.parse_args(argv)

    convert = bin_to_text if args.reverse else text_to_bin
    try:
        convert(args.infile, args.outfile)
    except MalformedInputError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
