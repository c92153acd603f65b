'''
Author: leviathan 670916484@qq.com
Date: 2025-11-21 09:47:52
LastEditors: leviathan 670916484@qq.com
LastEditTime: 2025-11-21 15:40:36
FilePath: /heatrod/src/heatrod/cli.py
Description: heatrod 命令行入口，默认参数就是参考算例

Copyright (c) 2025 by leviathan, All Rights Reserved. 
'''
import sys
from typing import Dict, Tuple

import click
from loguru import logger

from . import __version__
from .backend.base import BackendKind
from .config import RodConfig
from .errors import ConfigurationError
from .simulator import HeatFlow

# 不给 --source 时左端放一个 100 度热源
DEFAULT_SOURCES: Dict[int, float] = {0: 100.0}


def _parse_sources(ctx, param, value: Tuple[str, ...]) -> Dict[int, float]:
    """--source INDEX=TEMP，可重复."""
    sources: Dict[int, float] = {}
    for item in value:
        index, sep, temp = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected INDEX=TEMP, got {item!r}", ctx=ctx, param=param)
        try:
            sources[int(index)] = float(temp)
        except ValueError:
            raise click.BadParameter(f"expected INDEX=TEMP, got {item!r}", ctx=ctx, param=param)
    return sources


def _setup_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@click.command()
@click.version_option(version=__version__, prog_name="heatrod")
@click.option("--initial", type=float, default=10.0, show_default=True,
              help="Uniform initial temperature.")
@click.option("--sections", type=int, default=6, show_default=True,
              help="Number of rod sections.")
@click.option("-k", "--diffusivity", type=float, default=0.1, show_default=True,
              help="Diffusivity constant K.")
@click.option("--source", "sources", multiple=True, callback=_parse_sources,
              metavar="INDEX=TEMP", help="Seed a cell with a temperature (repeatable, default 0=100.0).")
@click.option("--no-default-source", is_flag=True,
              help="Without --source, start from a uniform rod instead of 0=100.0.")
@click.option("--steps", type=click.IntRange(min=0), default=2, show_default=True,
              help="Number of time steps after the initial render.")
@click.option("--backend", type=click.Choice([b.value for b in BackendKind]),
              default=BackendKind.NUMPY.value, show_default=True)
@click.option("--strict", is_flag=True, help="Reject K outside the stable range.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def main(initial, sections, diffusivity, sources, no_default_source, steps, backend,
         strict, verbose) -> None:
    """Simulate heat diffusion along a rod and print a table per step."""
    _setup_logging(verbose)
    if not sources and not no_default_source:
        sources = DEFAULT_SOURCES.copy()

    config = RodConfig(
        initial_temp=initial,
        sections=sections,
        k=diffusivity,
        sources=sources,
        backend=BackendKind(backend),
        strict_stability=strict,
    )
    try:
        sim = HeatFlow.from_config(config)
    except ConfigurationError as e:
        raise click.UsageError(str(e))

    sim.pretty_print()
    sim.run(steps, callback=lambda s: s.pretty_print())


if __name__ == "__main__":
    main()
