"""Invoice rendering: formatting, view projection and template variants"""
