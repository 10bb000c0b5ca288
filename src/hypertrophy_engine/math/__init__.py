"""Pure calculations behind the session and tempo activities."""
