"""Helpers for characters, strings, byte buffers, linked lists and output."""