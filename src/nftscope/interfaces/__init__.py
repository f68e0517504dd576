"""Web and REST interfaces"""
