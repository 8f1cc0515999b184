"""
The VIEW layer renders the model with Qt and PyVista.
Only ``overlay`` is importable without a GUI stack.
"""
