import click

from .cache import Cache
from .config import CacheConfig
from .errors import CsimError
from .processor import AccessProcessor
from .stats import Summary
from .trace import MAX_SIZE, read_trace


def print_summary(summary: Summary):
    click.echo('hits:{} misses:{} evictions:{} dirty_bytes_in_cache:{} '
               'dirty_bytes_evicted:{}'.format(*summary))


def format_entry(entry):
    return ' '.join(part for part in (
        '{} {:x},{}'.format(entry.op_type, entry.address, entry.word_size),
        entry.result, entry.eviction) if part)


@click.command(context_settings=dict(help_option_names=['-h', '--help']))
@click.option('-v', '--verbose', is_flag=True, help='Verbose mode: report effects of each memory operation')
@click.option('-s', '--s', type=int, help='Number of set index bits (S = 2^s is the number of sets)')
@click.option('-E', '--E', type=int, help='Associativity (number of lines per set)')
@click.option('-b', '--b', type=int, help='Number of block bits (B = 2^b is the block size)')
@click.option('-t', '--trace_file', type=str, help='Name of the valgrind trace to replay')
@click.option('--max-size', type=int, default=MAX_SIZE, show_default=True,
              help='Access sizes must be below this value')
def main(verbose, s, e, b, trace_file, max_size):
    """Simulate a set-associative LRU cache over a memory trace.

    The -s, -b, -E and -t options must be supplied for all simulations.
    """
    try:
        summary = run(s, e, b, trace_file, verbose, max_size)
    except CsimError as err:
        raise click.ClickException(str(err))
    print_summary(summary)


def run(s, e, b, trace_file, verbose=False, max_size=MAX_SIZE) -> Summary:
    if verbose:
        click.echo('verbose mode on')
    config = CacheConfig(s, e, b, trace_file)
    processor = AccessProcessor(Cache(config))
    operations = read_trace(config.trace_file, config.s, config.b, max_size)
    click.echo('s={}, E={}, b={}'.format(config.s, config.E, config.b))
    for op in operations:
        entry = processor.update(op)
        if verbose:
            click.echo(format_entry(entry))
    return processor.summary()
