#!/usr/bin/env python3
import argparse

from loguru import logger

from chunking_tools.splitting import chunked, clustered


@logger.catch
def get_arguments():
    parser = argparse.ArgumentParser(
        description="Print the words of a text file in fixed-size chunks",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument("text_path",
                        help="The path to the text file.",
                        nargs='+',
                        type=str)
    parser.add_argument("-s",
                        "--span",
                        help="The number of words per chunk.",
                        type=int,
                        default=10)
    parser.add_argument("-r",
                        "--reverse",
                        help="Print the chunks last to first.",
                        action='store_true')
    parser.add_argument("--per-line",
                        help="Chunk each line separately instead of the whole text.",
                        action='store_true')
    return parser.parse_args()


@logger.catch
def print_chunks(text_paths: list[str], span: int, reverse: bool, per_line: bool):
    for text_path in text_paths:
        logger.info(f"<= {text_path}")
        with open(text_path, encoding='utf-8') as f:
            lines = f.readlines()
        if per_line:
            for line_no, line in enumerate(lines, start=1):
                groups = clustered(line.split(), span)
                for words in (reversed(groups) if reverse else groups):
                    print(f"{line_no}: {' '.join(words)}")
        else:
            view = chunked([w for line in lines for w in line.split()], span)
            chunks = reversed(view) if reverse else view
            for chunk in chunks:
                print(' '.join(chunk))
            logger.info(f"{len(view)} chunks")


if __name__ == '__main__':
    args = get_arguments()
    if args.text_path:
        print_chunks(args.text_path, args.span, args.reverse, args.per_line)
