"""
Source root for the TTRPG combat tracker.

This directory contains the top-level packages of the tracker: the combatant
records, actions and their effects, statuses, equipment, the combat engine and
persistence of sessions and saves.
"""
