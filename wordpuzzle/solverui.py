import pathlib

import click

from rich.console import Console
print = Console(color_system='truecolor', highlight=False).print

import logging
logger = logging.getLogger()

from wordpuzzle.dictionary import Dictionary, DEFAULT_URL
from wordpuzzle.solver import Solver, normalize_pattern
from wordpuzzle.utils import dotdict, parse_bounds

class SolverUI:

    def __init__(self, args):
        args = dotdict(args)

        self.args = args
        self.dictionary = Dictionary.load(args.dict or args.url)
        self.solver = Solver(self.dictionary.words)
        self.min_length, self.max_length = parse_bounds(args.min, args.max)

    @property
    def pattern(self):
        return self.args.pattern

    def print_words(self, words, limit=None):
        if not words:
            print("[dim]no words found[/dim]")
            return

        shown = words[:limit] if limit else words
        print(', '.join(shown))

        if len(shown) < len(words):
            print(f"[dim]... and {len(words) - len(shown)} more[/dim]")

        print(f"[bold]{len(words)}[/bold] possible words")

    def print_hint(self):
        hint = self.solver.hint(self.pattern, self.min_length, self.max_length)
        print(f"Hint: [blue]{hint}[/blue]")

    def solve(self):
        if self.dictionary.failed:
            print("[red]Failed to load dictionary. Please check your connection.[/red]")
            raise SystemExit(1)

        if not normalize_pattern(self.pattern):
            print("nothing to solve, use letters and * for unknown letters (e.g., c*t)")
            return

        logger.debug(f"bounds: {self.min_length}..{self.max_length}")

        if self.args.hint:
            self.print_hint()
            return

        words = self.solver.solve(self.pattern, self.min_length, self.max_length)
        self.print_words(words, self.args.limit)


@click.command(context_settings=dict(auto_envvar_prefix='WORDPUZZLE'))
@click.option('--dict', default=None, type=click.Path(exists=True, readable=True, path_type=pathlib.Path),
              help="local word list, one word per line")
@click.option('--url', default=DEFAULT_URL, show_default=True, help="fetch the word list from here when --dict isn't given")
@click.option('--min', metavar='length', default=None, help="minimum word length")
@click.option('--max', metavar='length', default=None, help="maximum word length")
@click.option('--hint', is_flag=True, help="only show the start of the first match")
@click.option('--limit', default=0, type=click.IntRange(min=0), help="show at most this many words (0 = all)")
@click.option('-v', '--verbose', is_flag=True, help="debug logging")
@click.argument('pattern', nargs=1)
@click.pass_context
def cli(ctx, *_, **args):
    """
    find words that can be made from the letters in PATTERN

    \b
    *  for an unknown letter, e.g. c*t -> cat, cot, cut
    words don't have to use every letter given
    """

    logging.basicConfig(format="%(message)s", level=logging.DEBUG if args['verbose'] else logging.INFO)

    try:
        ui = SolverUI(args)
        ui.solve()
    except KeyboardInterrupt:
        pass
