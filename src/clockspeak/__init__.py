"""clockspeak — speaking-clock core.

Turns a real-time-clock reading into the ordered list of pre-recorded
audio clips that announce the local time or date in German or English.
"""

__version__ = "0.4.0"
