from __future__ import annotations

import warnings


# ======================================================================


class FormatStyle:
    """
    Base class for a formatting operation applied to a line of solver
    output.  A style may be linked to a parent style, which places it
    one level lower in the output hierarchy.

    Derived classes override `apply(s)` to do the formatting.

    Parameters
    ----------
    parent : FormatStyle, Optional
        The parent style, if any.
    """

    def __init__(self, parent: FormatStyle = None):
        self.parent = parent

    # -- Public Methods ------------------------------------------------

    def apply(self, s: str) -> str:
        """Return `s` unchanged.  Derived classes should override."""
        return s

    @property
    def level(self) -> int:
        """
        Level of this style in the tree of styles.  The top (root)
        style has a level of 1.
        """
        if self.parent:
            return self.parent.level + 1
        else:
            return 1


# ----------------------------------------------------------------------

class PrintStyles:
    """
    `PrintStyles` holds a named collection of `FormatStyle` objects
    arranged by parent / child relationships.  A line printed with a
    given style only appears if the level of the style is at or above
    the `display_level`.

    Parameters
    ----------
    display_level : int, default = 10
        Lowest number style level to display.  The highest level is
        **1**. Setting ``display_level=0`` will suppress output.

    Examples
    --------
    >>> fmt = PrintStyles(display_level=1)
    >>> fmt.add('solver', LevelTabStyle())
    >>> fmt.add('step', LevelTabStyle(), parent='solver')
    >>> fmt.print('solver', "Bisecting root on [1.0, 2.0]:")
    Bisecting root on [1.0, 2.0]:
    >>> fmt.print('step', "Hidden at display_level = 1.")
    >>> fmt.print('step', "Iteration 1: x = 1.5", display_level=2)
        Iteration 1: x = 1.5
    """

    def __init__(self, display_level: int = 10):
        self.display_level = display_level
        self._styles: dict[str, FormatStyle] = {}

    # -- Public Methods ------------------------------------------------

    def add(self, name: str, style: FormatStyle, parent: str = None):
        """
        Adds a new style to the collection.

        Parameters
        ----------
        name : str
            Name of added style.
        style : FormatStyle
            Style object.  Any existing `style.parent` is overwritten.
        parent : str, Optional
            Name of parent style (to insert below).

        Raises
        ------
        ValueError
            If `name` already exists or `parent` does not exist.
        """
        if name in self._styles:
            raise ValueError(f"Print style '{name}' already defined.")

        if parent:
            try:
                style.parent = self._styles[parent]
            except KeyError:
                raise ValueError(f"Parent print style '{parent}' not found.")
        else:
            style.parent = None

        self._styles[name] = style

    def apply(self, name: str, s: str) -> str:
        """
        Apply format style `name` to string `s`, including any parent
        styles.

        Raises
        ------
        ValueError
            If `name` is not found.
        """
        try:
            style = self._styles[name]
        except KeyError:
            raise ValueError(f"Style '{name}' not found.")

        return style.apply(s)

    def print(self, name: str | None, s: str = '', *args,
              display_level: int = None, **kwargs):
        """
        Print string `s` after applying formatting, if style `name` is
        at or above the `display_level`.

        Parameters
        ----------
        name : str
            Name of format style to apply, or `None` to bypass
            formatting.

            .. note::If `name` is not found, a warning is generated
               and `s` is printed without formatting.

        s : str, default = ''
            String to format.

        display_level : int
            If supplied, sets the `display_level` parameter for this
            print operation only.

        *args, **kwargs :
            Remaining positional and keyword arguments passed directly
            to `print` after `s`.
        """
        if name is None:
            print(s, *args, **kwargs)
            return

        try:
            style = self._styles[name]
        except KeyError:
            print(s, *args, **kwargs)
            warnings.warn(f"Format style '{name}' not found.")
            return

        if display_level is None:
            display_level = self.display_level

        if style.level <= display_level:
            print(style.apply(s), *args, **kwargs)


# ======================================================================

# Standard format styles.

class AddDotStyle(FormatStyle):
    """
    If the style has a parent, prepends three dots and a space
    (``... ``) to the string before applying the parent style.
    """

    def apply(self, s: str) -> str:
        if self.parent:
            return self.parent.apply('... ' + s)
        else:
            return s


class LevelTabStyle(FormatStyle):
    r"""Outputs ('level' - 1) sets of four spaces before the string."""

    def apply(self, s: str) -> str:
        return '    ' * (self.level - 1) + s
