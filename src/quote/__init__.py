"""
Quote Module
============

Latest price, change and change percent per symbol from the Yahoo Finance chart API.
"""
