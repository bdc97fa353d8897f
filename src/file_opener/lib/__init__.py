"""Core library: configuration, dispatch, and the open/reveal tools.

Primary namespaces:
- ``file_opener.lib.tools`` for the tool catalog and command execution.
- ``file_opener.lib.dispatch`` for routing invocation requests.
"""
