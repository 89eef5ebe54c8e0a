import pytest
from rich.console import Console
from pagedvec import PagedVectorConfig
from cli import benchmark
from cli.benchmark import run_benchmark, render_result
from cli.main import main, build_parser


def small_config():
    return PagedVectorConfig(page_bits=6, min_page_count=2, typecode='B')


def test_run_benchmark_ok():
    result = run_benchmark(1000, small_config())
    assert result.ok
    assert result.length == 1000
    assert [t.name for t in result.timings] == ['paged_vector']
    timing = result.timings[0]
    assert timing.total == pytest.approx(timing.fill + timing.assign + timing.compare)


def test_run_benchmark_with_baseline():
    result = run_benchmark(300, small_config(), baseline=True)
    assert result.ok
    assert [t.name for t in result.timings] == ['paged_vector', 'list']


def test_run_benchmark_detects_mismatch(monkeypatch):
    monkeypatch.setattr(benchmark, '_expected', lambda i: 7 if i == 130 else i % 256)
    result = run_benchmark(200, small_config())
    assert not result.ok
    assert result.mismatch == 130
    assert result.mismatch_value == 130


def test_run_benchmark_rejects_negative_length():
    with pytest.raises(ValueError):
        run_benchmark(-1, small_config())


def test_render_result():
    console = Console(record=True, width=120)
    render_result(run_benchmark(100, small_config(), baseline=True), console)
    text = console.export_text()
    assert 'paged_vector' in text
    assert 'list' in text
    assert 'Ok' in text


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.length == 16 * 1024 * 1024 + 7
    assert args.page_bits == 25
    assert args.min_pages == 4
    assert args.typecode == 'B'
    assert not args.baseline


def test_main_success(capsys):
    code = main(['--length', '500', '--page-bits', '5', '--min-pages', '1', '--baseline'])
    assert code == 0
    assert 'Ok' in capsys.readouterr().out


def test_main_list_pages():
    assert main(['--length', '70', '--page-bits', '3', '--typecode', 'none']) == 0


def test_main_bad_config(capsys):
    code = main(['--length', '10', '--page-bits', '0'])
    assert code == 2
    assert 'page_bits' in capsys.readouterr().out
