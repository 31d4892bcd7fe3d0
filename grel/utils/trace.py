"""Event tracing for function calls, for debugging and inspection.

Calls dispatched through `grel.dispatch` open a `call` block on the current
tracer and emit events such as `not_applicable` or `arity_error` inside it.
Listeners subscribe to event paths with globs, e.g. `call/not_applicable`
or `**`.
"""

import re
import sys
from collections import defaultdict
from contextvars import ContextVar
from copy import copy


def glob_to_regex(glob):
    """Transform a glob-like expression into a regular expression.

    * `**` matches any character sequence including the / delimiter
        * `/**/` can also match `/`
    * `*` matches any character sequence except /
    * If glob does not start with /, `/**/` is prepended
    """

    def replacer(m):
        if m.group() == "/**/":
            return r"(/.*/|/)"
        else:
            return r"[^/]*"

    if glob.startswith("**"):
        glob = f"/{glob}"
    elif not glob.startswith("/"):
        glob = f"/**/{glob}"
    if glob.endswith("**"):
        glob += "/*"

    patt = r"/\*\*/|\*"
    glob = re.sub(patt, replacer, glob)
    return re.compile(glob)


class Tracer:
    """Event-based tracer."""

    def __init__(self):
        """Initialize the Tracer."""
        self.stack = []
        self.curpath = ""
        self.listeners = []

    def emit(self, name, **kwargs):
        """Emit an event."""
        curpath = self.curpath + f"/{name}"
        for path, fn in self.listeners:
            if path.fullmatch(curpath):
                fn(**kwargs, _event=name, _stack=self.stack, _curpath=curpath)

    def on(self, pattern, fn):
        """Register a function to trigger on a certain pattern.

        The pattern can be an event name or a glob (see `glob_to_regex`).
        A pattern that does not start with `/` is equivalent to the same
        pattern prepended with `/**/`, e.g. `not_applicable` is equivalent
        to `/**/not_applicable`.
        """
        if not isinstance(pattern, re.Pattern):
            pattern = glob_to_regex(pattern)
        self.listeners.append((pattern, fn))

    def __copy__(self):
        cp = Tracer()
        cp.stack = list(self.stack)
        cp.curpath = self.curpath
        cp.listeners = list(self.listeners)
        return cp

    def __call__(self, name, **kwargs):
        """Start an enter/exit block using the given name."""
        return TracerContextManager(self, name, kwargs)

    def __getattr__(self, attr):
        if attr.startswith("emit_"):
            attr = attr[5:]
            return lambda **kwargs: self.emit(attr, **kwargs)
        elif attr.startswith("on_"):
            attr = attr[3:]
            return lambda fn: self.on(attr, fn)
        else:
            raise AttributeError(attr)


class TracerContextManager:
    """Represents a tracing block that is entered and then exited."""

    def __init__(self, tracer, name, kwargs):
        """Initialize a TracerContextManager."""
        self.tr = tracer
        self.name = name
        self.kwargs = kwargs
        self.results = {}

    def set_results(self, **results):
        """Set the block's results, which will be sent with the exit event."""
        self.results = results

    def __enter__(self):
        self.tr.stack.append(self)
        self.tr.curpath += f"/{self.name}"
        self.tr.emit("enter", _context=self, **self.kwargs)
        return self

    def __exit__(self, *_):
        self.tr.emit("exit", _context=self, **self.results)
        self.tr.stack.pop()
        self.tr.curpath = "".join(f"/{x.name}" for x in self.tr.stack)

    def __str__(self):
        return f"<TracerContextManager {self.name}>"

    __repr__ = __str__


_tracer = ContextVar("tracer", default=None)


def tracer(name=None, **kwargs):
    """Return or use the current tracer.

    Returns:
        * With no arguments, returns the current tracer.
        * With arguments, returns a TracerContextManager that may be used
          with the `with` statement

    """
    v = _tracer.get()
    if v is None:
        # Each context gets its own block stack.
        v = Tracer()
        _tracer.set(v)
    if name is not None:
        return v(name, **kwargs)
    else:
        assert not kwargs
        return v


class TraceListener:
    """Represents a collection of listeners on a tracer.

    Listeners are installed on a copy of the current tracer for the duration
    of a `with` block, so they never leak into other contexts.

    Arguments:
        focus: A glob prepended to this listener's patterns.
    """

    def __init__(self, focus=None):
        """Initialize a TraceListener."""
        self.focus = focus

    def install(self, tracer):
        """Install the listeners on the tracer."""
        for method_name in dir(self):
            if method_name.startswith("on_"):
                ev = method_name[3:]
                patt = f"{self.focus}/{ev}" if self.focus else ev
                tracer.on(patt, getattr(self, method_name))

    def post(self):
        """Do things after the process is completed."""
        pass

    def __enter__(self):
        self.tracer = copy(tracer())
        self.token = _tracer.set(self.tracer)
        self.install(self.tracer)
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        _tracer.reset(self.token)
        self.post()


class EventLog(TraceListener):
    """Record every event matching a pattern.

    Each record is a `(path, arguments)` pair, where the arguments exclude
    the private fields the tracer adds.

    Arguments:
        pattern: The glob to listen to. Defaults to all events.
        file: If given, each event is also written to this stream as it
            happens.
    """

    def __init__(self, pattern="**", *, focus=None, file=None):
        """Initialize an EventLog."""
        super().__init__(focus)
        self.pattern = pattern
        self.file = file
        self.events = []

    def install(self, tracer):
        """Install the log."""
        patt = self.pattern
        if self.focus:
            patt = f"{self.focus}/{patt}"
        tracer.on(patt, self._record)

    def _record(self, _curpath=None, **kwargs):
        args = {k: v for k, v in kwargs.items() if not k.startswith("_")}
        self.events.append((_curpath, args))
        if self.file is not None:
            fields = " ".join(f"{k}={v!r}" for k, v in args.items())
            print(f"{_curpath} {fields}".rstrip(), file=self.file)

    def paths(self):
        """Return the list of event paths, in order."""
        return [path for path, _ in self.events]


class TraceExplorer(TraceListener):
    """Print out all distinct events and the types of their arguments."""

    def __init__(self, focus=None, file=sys.stdout):
        """Initialize a TraceExplorer."""
        super().__init__(focus)
        self.file = file
        self.paths = defaultdict(lambda: defaultdict(set))

    def install(self, tracer):
        """Install the TraceExplorer."""
        patt = self.focus or "**"
        tracer.on(patt, self._log_keys)

    def _log_keys(self, _curpath=None, **kwargs):
        d = self.paths[_curpath]
        for k, v in kwargs.items():
            if not k.startswith("_"):
                d[k].add(type(v))

    def post(self):
        """Print the events and their arguments."""
        for path, keys in self.paths.items():
            print(path, file=self.file)
            for key in sorted(keys):
                typenames = {v.__qualname__ for v in keys[key]}
                print(
                    "    ",
                    key,
                    "::",
                    " | ".join(sorted(typenames)),
                    file=self.file,
                )


__consolidate__ = True
__all__ = [
    "EventLog",
    "TraceExplorer",
    "TraceListener",
    "Tracer",
    "TracerContextManager",
    "glob_to_regex",
    "tracer",
]
