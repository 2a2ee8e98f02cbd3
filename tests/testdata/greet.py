import os


def greet(name):
    return "hi " + name
