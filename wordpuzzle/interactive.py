import pathlib
import asyncio
import string

import click
import urwid
from blinker import Namespace

import logging
logging.getLogger('asyncio').setLevel(logging.WARNING)
logger = logging.getLogger()

from wordpuzzle.dictionary import Dictionary, DEFAULT_URL
from wordpuzzle.solver import solve, hint
from wordpuzzle.utils import parse_bounds

PATTERN_KEYS = set(string.ascii_letters + '*')
USAGE = 'Use * for unknown letters (e.g., "c*t" -> "cat")'
FETCH_ERROR = 'Failed to load dictionary. Please check your connection.'

class Signal:
    """
    a blinker signal that is also a variable
    when signal.value is set, emit the new value
    """

    def __init__(self, namespace, name, value=None):
        self._value = value
        self._signal = namespace.signal(name)

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value = value
        self._signal.send(self._signal.name, value=self.value)

    def __getattr__(self, name):
        return getattr(self._signal, name)


class Signals:

    @staticmethod
    def urwid_to_blinker(signal):
        """
        usage: urwid.connect_signal(edit, 'change', urwid_to_blinker(signal))
        sets signal.value to the edit's new text
        """
        def _converter(widget, text):
            signal.value = text
        return _converter

    def __init__(self):
        ns = Namespace()

        self.pattern    = Signal(ns, 'pattern',    value='')
        self.min_length = Signal(ns, 'min_length', value='')
        self.max_length = Signal(ns, 'max_length', value='')
        self.dictionary = Signal(ns, 'dictionary', value=tuple())
        self.wordlist   = Signal(ns, 'wordlist',   value=list())
        self.hint       = Signal(ns, 'hint',       value='')
        self.error      = Signal(ns, 'error',      value='')


class Form:
    """
    reads the current form values and hands them to the engine,
    results go back out on the wordlist and hint signals
    """

    def __init__(self, signals):
        self.signals = signals

    @property
    def pattern(self):
        return self.signals.pattern.value

    @property
    def enabled(self):
        # solve/hint buttons are dead while there's nothing to search for
        return bool(self.pattern.strip())

    @property
    def bounds(self):
        return parse_bounds(self.signals.min_length.value, self.signals.max_length.value)

    def solve(self):
        if not self.enabled:
            return

        min_length, max_length = self.bounds
        words = solve(self.pattern, self.signals.dictionary.value, min_length, max_length)
        logger.info(f"{len(words)} words for {self.pattern}")
        self.signals.wordlist.value = words

    def hint(self):
        if not self.enabled:
            return

        min_length, max_length = self.bounds
        self.signals.hint.value = hint(self.pattern, self.signals.dictionary.value, min_length, max_length)


class Window(urwid.WidgetWrap):
    def __init__(self, *args, **kw):
        super().__init__(
            urwid.LineBox(*args, **kw)
        )

    def __repr__(self):
        return self.__class__.__name__

    @property
    def original_widget(self):
        # return what's inside the LineBox
        return self._w


class WinPattern(Window):
    def __init__(self, form, *args, **kw):
        self.form = form

        label = urwid.Text('letters:')
        edit = urwid.AttrMap(
            urwid.Edit('', '', multiline=False, align='left', wrap='clip'),
            'default', 'editing'
        )
        widget = urwid.Columns([
                (10, label),
                ('weight', 3, edit),
        ], dividechars=-1)

        super().__init__(widget)

    def keypress(self, size, key):

        if key == 'enter':
            self.form.solve()
            return

        if key == 'backspace':
            self.text = self.text[:-1]
            return

        # propagate keypress if not a letter or wildcard
        if key not in PATTERN_KEYS:
            return key

        self.text += key

    @property
    def widget(self):
        # the edit box
        return self.original_widget.original_widget.contents[1][0].original_widget

    @property
    def text(self):
        return self.widget.get_edit_text()

    @text.setter
    def text(self, text):
        text = text.strip()
        self.widget.set_edit_text(text)
        self.widget.edit_pos = len(text)

        self.form.signals.pattern.value = text


class WinBounds(Window):
    def __init__(self, signals, *args, **kw):
        self.min_edit = urwid.Edit('min: ', '', multiline=False, wrap='clip')
        self.max_edit = urwid.Edit('max: ', '', multiline=False, wrap='clip')

        urwid.connect_signal(self.min_edit, 'change', Signals.urwid_to_blinker(signals.min_length))
        urwid.connect_signal(self.max_edit, 'change', Signals.urwid_to_blinker(signals.max_length))

        widget = urwid.Columns([
            urwid.AttrMap(self.min_edit, 'default', 'editing'),
            urwid.AttrMap(self.max_edit, 'default', 'editing'),
        ], dividechars=1)

        super().__init__(widget, title='Length', title_align='left', tlcorner='┬', blcorner='┴')


class WinActions(Window):
    def __init__(self, form, *args, **kw):
        self.form = form

        self.hint_text = urwid.Text('')
        widget = urwid.Columns([
            (9, urwid.Button('Solve', on_press=self.cb_solve)),
            (8, urwid.Button('Hint', on_press=self.cb_hint)),
            ('weight', 1, urwid.AttrMap(self.hint_text, 'hint')),
        ], dividechars=1)

        super().__init__(widget)

        form.signals.hint.connect(self.cb_hint_changed)

    def cb_solve(self, button):
        self.form.solve()

    def cb_hint(self, button):
        self.form.hint()

    def cb_hint_changed(self, sender, value):
        self.hint_text.set_text(f"Hint: {value}" if value else '')


class WinMatches(Window):

    def __init__(self, signals, *args, **kw):
        self.signals = signals
        super().__init__(
            urwid.Filler(
                urwid.Text(USAGE),
                valign='top',
            ),
            title='Possible Words', title_align='left',
        )

        signals.dictionary.connect(self.cb_dictionary)
        signals.wordlist.connect(self.cb_wordlist)
        signals.error.connect(self.cb_error)

    @property
    def widget(self):
        return self.original_widget.original_widget.original_widget

    @property
    def text(self):
        text, _ = self.widget.get_text()
        return text

    @text.setter
    def text(self, value):
        self.widget.set_text(value)

    def cb_dictionary(self, sender, value):
        logger.info(f"dictionary loaded, {len(value)} words")

    def cb_wordlist(self, sender, value):
        if value:
            self.text = ' '.join(value)
        else:
            self.text = 'no words found'

    def cb_error(self, sender, value):
        if value:
            self.text = ('error', value)


class WinCounts(Window):
    def __init__(self, signals, *args, **kw):
        font = urwid.Thin3x3Font()
        widget = urwid.Padding(
            urwid.BigText('', font),
            align='center', width='clip'
        )
        super().__init__(widget, title='Word Count', title_align='left')

        signals.wordlist.connect(self.cb_wordlist)

    @property
    def widget(self):
        return self.original_widget.original_widget.original_widget

    def cb_wordlist(self, sender, value):
        self.widget.set_text(str(len(value)))


class WinLogging(Window):

    def __init__(self, *args, **kw):
        super().__init__(
            urwid.BoxAdapter(
                urwid.ListBox(urwid.SimpleListWalker([])),
                height=3
            ),
            title="Logging", title_align='left', tlcorner='┬', blcorner='┴',
        )

    @property
    def listbox(self):
        return self.original_widget.original_widget.original_widget


class MainFrame(urwid.Frame):
    def __init__(self, app, *args, **kw):
        super().__init__(urwid.Text(''), *args, **kw)

        self.app = app
        form = app.form

        self.win_logging = WinLogging()
        self.win_pattern = WinPattern(form)

        self.header = urwid.Pile([
            urwid.Columns([
                ('weight', 2, self.win_pattern),
                ('weight', 1, WinBounds(form.signals)),
            ], dividechars=-1),
            WinActions(form),
        ])

        self.body = WinMatches(form.signals)

        self.footer = urwid.Columns([
            ('weight', 1, WinCounts(form.signals)),
            ('weight', 2, self.win_logging),
        ], dividechars=-1)


class App:

    def __init__(self, args):
        self.args = args
        self.signals = Signals()
        self.form = Form(self.signals)

    def setup(self):

        self.frame = MainFrame(self, focus_part='header')
        replace_handlers(logger, self.frame.win_logging.listbox)

        # load once, then hand the words to whoever is listening
        dictionary = Dictionary.load(self.args['dict'] or self.args['url'])

        if dictionary.failed:
            self.signals.error.value = FETCH_ERROR

        self.signals.dictionary.value = dictionary.words

    def run(self):
        palette = [
            # (name, foreground, background, mono, foreground_high, background_high)
            ('default', 'default', '', '', '', ''),
            ('editing', 'black,underline', 'light gray', 'standout,underline', 'standout', 'black'),
            ('hint', 'light blue', '', '', '#08f', ''),
            ('error', 'light red', '', '', '#f00', ''),
        ]

        event_loop = urwid.AsyncioEventLoop(loop=asyncio.new_event_loop())
        self.loop = urwid.MainLoop(self.frame,
                                   palette,
                                   unhandled_input=self.handle_keypress,
                                   handle_mouse=False,
                                   event_loop=event_loop,
                                   )

        self.loop.screen.set_terminal_properties(colors=256)
        self.loop.run() # blocking

    def handle_keypress(self, key):
        logger.debug(f"input: {key}")

        if key in ('f10', 'esc'):
            raise urwid.ExitMainLoop()

        return key


class UrwidHandler(logging.StreamHandler):
    def __init__(self, listbox):
        super().__init__()
        self.listbox = listbox

    def emit(self, record):
        msg = self.format(record)
        msg = urwid.Text(msg)
        self.listbox.body.append(msg)
        self.listbox.set_focus(len(self.listbox.body) - 1) # scroll to last line

def replace_handlers(logger, listbox):
    """
    replace current handlers and emit to given urwid.ListBox
    """
    logger.handlers = [UrwidHandler(listbox)]

@click.command(context_settings=dict(auto_envvar_prefix='WORDPUZZLE'))
@click.option('--dict', default=None, type=click.Path(exists=True, readable=True, path_type=pathlib.Path))
@click.option('--url', default=DEFAULT_URL, show_default=True)
@click.option('-v', '--verbose', is_flag=True, help="debug logging")
@click.pass_context
def cli(ctx, *_, **args):
    """
    interactively search a word list for words made from the given letters

    \b
    *         for an unknown letter
    enter     solve
    esc/f10   quit
    """
    logging.basicConfig(format="%(message)s", level=logging.DEBUG if args['verbose'] else logging.INFO)

    try:
        app = App(args)
        app.setup()
        app.run()       # blocking call
    except KeyboardInterrupt:
        pass
