class LTurtleError(Exception):
    """Base class for errors raised by lturtle."""


class ConfigError(LTurtleError, ValueError):
    """Malformed plant definition, TOML document or preset name."""


class UnbalancedStackError(LTurtleError, ValueError):
    """Pop without a matching push (only raised in strict mode)."""
