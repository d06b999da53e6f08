"""Host adapters that turn engine state into something a terminal can show."""
