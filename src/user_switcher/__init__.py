"""Icon, label and layout helpers for a settings-style user switcher."""
