#!/usr/bin/env python3
import json
import os

import hydra
from loguru import logger
from omegaconf import DictConfig

from chunking_tools.model import Batch
from chunking_tools.splitting import chunked


@hydra.main(version_base=None, config_path="../conf", config_name="batch-lines")
@logger.catch
def main(cfg: DictConfig) -> None:
    lines = read_lines(cfg.input_file, cfg.skip_empty_lines)
    view = chunked(lines, cfg.batch_size, start=cfg.start_line, end=cfg.end_line)
    layout = view.layout()
    logger.info(f"{layout.element_count} lines -> {layout.group_count} batches of {layout.span}")
    if layout.has_straggler():
        logger.info(f"last batch holds {layout.straggler_length} lines")

    batches = [Batch(index=n, first_element=i, items=list(view[i])) for n, i in enumerate(view.indices())]
    export(batches, cfg.output_file)


def read_lines(path: str, skip_empty_lines: bool) -> list[str]:
    logger.info(f"<= {path}")
    with open(path, encoding='utf-8') as f:
        lines = [line.rstrip('\n') for line in f]
    if skip_empty_lines:
        lines = [line for line in lines if line.strip()]
    return lines


def export(batches: list[Batch], path: str):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    logger.info(f"=> {path}")
    with open(path, 'w', encoding='utf-8') as f:
        json.dump([b.to_dict() for b in batches], fp=f, indent=2, ensure_ascii=False)


if __name__ == '__main__':
    main()
