from flask import Response

GREETING = "Hello, World!!!\n"


def root_handler():
    """Home route"""
    return Response(GREETING, status=200, mimetype='text/plain')
