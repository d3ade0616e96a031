from click.testing import CliRunner

from csim.cli import main, run


def invoke(*args):
    return CliRunner().invoke(main, list(args))


def write_trace(tmp_path, text):
    path = tmp_path / 'test.trace'
    path.write_text(text)
    return str(path)


def test_summary(tmp_path):
    trace = write_trace(tmp_path, 'S 0,1\nS 1,1\n')
    result = invoke('-s', '0', '-E', '1', '-b', '0', '-t', trace)
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        's=0, E=1, b=0',
        'hits:0 misses:2 evictions:1 dirty_bytes_in_cache:1 dirty_bytes_evicted:1',
    ]


def test_verbose(tmp_path):
    trace = write_trace(tmp_path, 'L 0,1\nL 0,1\nL 1,1\n')
    result = invoke('-v', '-s', '0', '-E', '1', '-b', '0', '-t', trace)
    assert result.exit_code == 0
    assert result.output.splitlines()[:5] == [
        'verbose mode on',
        's=0, E=1, b=0',
        'L 0,1 miss',
        'L 0,1 hit',
        'L 1,1 miss eviction',
    ]


def test_help_short_circuits():
    result = invoke('-h')
    assert result.exit_code == 0
    assert 'Associativity' in result.output
    assert 'hits:' not in result.output


def test_missing_option_fails(tmp_path):
    trace = write_trace(tmp_path, 'L 0,1\n')
    result = invoke('-s', '0', '-b', '0', '-t', trace)
    assert result.exit_code == 1
    assert 'Incorrect invocation' in result.output
    assert 'hits:' not in result.output


def test_extra_argument_rejected(tmp_path):
    trace = write_trace(tmp_path, 'L 0,1\n')
    result = invoke('-s', '0', '-E', '1', '-b', '0', '-t', trace, 'extra')
    assert result.exit_code != 0
    assert 'hits:' not in result.output


def test_bad_record_produces_no_statistics(tmp_path):
    trace = write_trace(tmp_path, 'L 0,1\nL 0,16\n')
    result = invoke('-s', '0', '-E', '1', '-b', '0', '-t', trace)
    assert result.exit_code == 1
    assert 'out of range' in result.output
    assert 'hits:' not in result.output


def test_unreadable_trace(tmp_path):
    result = invoke('-s', '0', '-E', '1', '-b', '0', '-t', str(tmp_path / 'nope'))
    assert result.exit_code == 1
    assert 'Error opening' in result.output


def test_max_size_option(tmp_path):
    trace = write_trace(tmp_path, 'L 0,20\n')
    result = invoke('-s', '0', '-E', '1', '-b', '0', '-t', trace, '--max-size', '32')
    assert result.exit_code == 0


def test_run_returns_summary(tmp_path):
    trace = write_trace(tmp_path, 'S 0,1\nL 0,1\n')
    summary = run(0, 2, 0, trace)
    assert summary == (1, 1, 0, 1, 0)


def test_invalid_action(tmp_path):
    trace = write_trace(tmp_path, 'L 0,1\nM 0,1\n')
    result = invoke('-s', '0', '-E', '1', '-b', '0', '-t', trace)
    assert result.exit_code == 1
    assert 'Invalid action: M' in result.output
    assert 'hits:' not in result.output


def test_verbose_announced_before_config_error(tmp_path):
    trace = write_trace(tmp_path, 'L 0,1\n')
    result = invoke('-v', '-s', '0', '-E', '0', '-b', '0', '-t', trace)
    assert result.exit_code == 1
    assert result.output.splitlines()[0] == 'verbose mode on'
    assert 'Incorrect invocation' in result.output
