"""drinkbar: single-user, in-memory drink inventory with a text menu.

Add drinks (name + category), delete every drink with a given name, and list
one category sorted by name. Nothing is saved; the inventory lives as long as
the session.

Usage:
    python -m drinkbar              # Menu loop until "4" or end of input
    python -m drinkbar --one-shot   # Exit after the first completed action
"""
