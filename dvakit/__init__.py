"""Linked lists, binary search trees, sorting routines, a console Simon Says game and nrfx configuration lookups."""

__version__ = "0.1.0"
__all__ = ["bstree", "linked_list", "options", "peripherals", "serial_io", "simon", "sorting"]