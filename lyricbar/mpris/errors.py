class MprisError(RuntimeError):
    pass


class NoPlayersFound(MprisError):
    """No org.mpris.MediaPlayer2.* service on the session bus."""


class PlayerUnavailable(MprisError):
    """The player went away or refused a property read."""
