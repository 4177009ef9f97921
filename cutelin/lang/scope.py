"""Symbol table for the cutelin language: a stack of scope frames, innermost last."""

from cutelin.lang.error import ScopeUnderflow


class ScopeStack:
    """Stack of name: int frames. The first frame is the global scope and can never be popped."""

    def __init__(self):
        self.frames = [{}]

    @property
    def depth(self):
        """Number of frames, 1 at global level."""
        return len(self.frames)

    def lookup(self, name):
        """Returns the value bound to name in the innermost frame that binds it, or None if no visible frame does."""
        for frame in reversed(self.frames):
            if name in frame:
                return frame[name]
        return None

    def bind(self, name, value):
        """Binds name in the innermost frame. Outer bindings of name are shadowed, never overwritten."""
        self.frames[-1][name] = value

    def push(self):
        self.frames.append({})

    def pop(self, expr="}"):
        """Discards the innermost frame and its bindings. expr is the offending expression reported on underflow."""
        if len(self.frames) == 1:
            raise ScopeUnderflow(expr)
        return self.frames.pop()

    def __contains__(self, name):
        return any(name in frame for frame in self.frames)

    def __len__(self):
        return len(self.frames)

    def __repr__(self):
        return f"ScopeStack({self.frames})"
