"""Recursion exercises: sortedness checking and the Towers of Hanoi."""