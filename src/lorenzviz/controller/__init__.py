"""
The CONTROLLER layer translates user input into operations on the model.
"""
