# -*- coding: utf-8 -*-
"""
基准测试驱动
填充（push_back）-> 赋值（深拷贝）-> 逐元素比对，分别计时；
可选地对普通 Python list 执行同样三个阶段作为对照。
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger
from rich.console import Console
from rich.table import Table
from rich import box

from pagedvec import PagedVector, PagedVectorConfig

DEFAULT_LENGTH = 16 * 1024 * 1024 + 7   # odd length on purpose
DEFAULT_PAGE_BITS = 25
DEFAULT_MIN_PAGES = 4
DEFAULT_TYPECODE = "B"


@dataclass
class PhaseTiming:
    """单个容器的各阶段耗时（秒）"""
    name: str
    fill: float = 0.0
    assign: float = 0.0
    compare: float = 0.0

    @property
    def total(self) -> float:
        return self.fill + self.assign + self.compare


@dataclass
class BenchmarkResult:
    """一次基准测试的结果"""
    length: int
    config: PagedVectorConfig
    timings: List[PhaseTiming] = field(default_factory=list)
    mismatch: Optional[int] = None     # 第一个不一致元素的偏移
    mismatch_value: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.mismatch is None


def _expected(i: int) -> int:
    return i % 256


def _run_paged(length: int, config: PagedVectorConfig, result: BenchmarkResult) -> None:
    timing = PhaseTiming("paged_vector")
    source = PagedVector(config)
    target = PagedVector(config)

    logger.info("Fill")
    start = time.perf_counter()
    push_back = source.push_back
    for i in range(length):
        push_back(i % 256)
    timing.fill = time.perf_counter() - start

    logger.info("Assign")
    start = time.perf_counter()
    target.assign_from(source)
    timing.assign = time.perf_counter() - start

    logger.info("Cmp")
    start = time.perf_counter()
    at = target.at
    for i in range(length):
        value = at(i)
        if value != _expected(i):
            result.mismatch = i
            result.mismatch_value = value
            logger.warning(f"Fail {value} {i}")
            break
    timing.compare = time.perf_counter() - start

    logger.debug(f"source={source!r} target={target!r}")
    result.timings.append(timing)


def _run_baseline(length: int, result: BenchmarkResult) -> None:
    timing = PhaseTiming("list")
    source: list = []

    start = time.perf_counter()
    append = source.append
    for i in range(length):
        append(i % 256)
    timing.fill = time.perf_counter() - start

    start = time.perf_counter()
    target = source[:]
    timing.assign = time.perf_counter() - start

    start = time.perf_counter()
    for i in range(length):
        if target[i] != _expected(i):
            if result.mismatch is None:
                result.mismatch = i
                result.mismatch_value = target[i]
            break
    timing.compare = time.perf_counter() - start
    result.timings.append(timing)


def run_benchmark(length: int = DEFAULT_LENGTH, config: Optional[PagedVectorConfig] = None,
                  baseline: bool = False) -> BenchmarkResult:
    """
    执行基准测试并返回结果。
    :param length: 元素个数
    :param config: 分页向量配置，缺省为 2^25 元素/页、每次扩容 4 页、字节元素
    :param baseline: 是否同时测量普通 list
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    config = config or PagedVectorConfig(page_bits=DEFAULT_PAGE_BITS,
                                         min_page_count=DEFAULT_MIN_PAGES,
                                         typecode=DEFAULT_TYPECODE)
    result = BenchmarkResult(length=length, config=config)
    _run_paged(length, config, result)
    if baseline:
        _run_baseline(length, result)
    if result.ok:
        logger.info("Ok")
    return result


def render_result(result: BenchmarkResult, console: Optional[Console] = None) -> None:
    """用 rich 表格输出结果"""
    console = console or Console()
    cfg = result.config
    table = Table(title=f"paged_vector benchmark (n={result.length}, page=2^{cfg.page_bits}, "
                        f"min_pages={cfg.min_page_count}, type={cfg.typecode or 'object'})",
                  box=box.ROUNDED, border_style="blue")
    table.add_column("container", style="cyan")
    table.add_column("fill (s)", justify="right")
    table.add_column("assign (s)", justify="right")
    table.add_column("compare (s)", justify="right")
    table.add_column("total (s)", justify="right", style="bold")
    for timing in result.timings:
        table.add_row(timing.name, f"{timing.fill:.3f}", f"{timing.assign:.3f}",
                      f"{timing.compare:.3f}", f"{timing.total:.3f}")
    console.print(table)
    if result.ok:
        console.print("[green]Ok[/green]")
    else:
        console.print(f"[red]Fail[/red] offset={result.mismatch} value={result.mismatch_value} "
                      f"expected={_expected(result.mismatch)}")
