"""Classic data structures and algorithms: arrays, sorting, searching, recursion, dynamic programming, linked lists, trees and graphs."""

__version__ = "0.1.0"