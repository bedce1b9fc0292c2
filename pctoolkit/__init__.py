"""Bit analysis, character ring buffers, a cursor list, file handling and a learning state machine."""

__version__ = "0.1.0"
__all__ = ["bits", "textutil", "circbuffer", "linkedlist", "ficheiro", "lfsm"]