# main.py

import sys
import argparse
from typing import List, Optional

from loguru import logger

from pagedvec import PagedVectorConfig, PagedVectorError
from cli.benchmark import (
    run_benchmark,
    render_result,
    DEFAULT_LENGTH,
    DEFAULT_PAGE_BITS,
    DEFAULT_MIN_PAGES,
    DEFAULT_TYPECODE,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="分页向量基准测试：填充、赋值、比对")
    parser.add_argument('--length', type=int, default=DEFAULT_LENGTH, help='元素个数')
    parser.add_argument('--page-bits', type=int, default=DEFAULT_PAGE_BITS, help='页大小指数（每页 2^P 个元素）')
    parser.add_argument('--min-pages', type=int, default=DEFAULT_MIN_PAGES, help='每次扩容至少新增的页数')
    parser.add_argument('--typecode', type=str, default=DEFAULT_TYPECODE,
                        help="array 类型码，'none' 表示使用 list 页面")
    parser.add_argument('--baseline', action='store_true', help='同时测量普通 list')
    parser.add_argument('--log-level', type=str, default='WARNING', help='日志级别')
    return parser


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(lambda msg: print(msg, end=''), level=level.upper())


def main(argv: Optional[List[str]] = None) -> int:
    """主函数：解析参数、运行基准测试并输出表格。返回进程退出码。"""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    typecode = None if args.typecode.lower() == 'none' else args.typecode
    try:
        config = PagedVectorConfig(page_bits=args.page_bits,
                                   min_page_count=args.min_pages,
                                   typecode=typecode).validate()
        result = run_benchmark(args.length, config, baseline=args.baseline)
    except (PagedVectorError, ValueError, OverflowError) as e:
        print(f"❌ 基准测试失败: {e}")
        return 2
    render_result(result)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
