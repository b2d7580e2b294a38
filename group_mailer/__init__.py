"""Doctor Group Mailer: groups of doctors on Firestore, with bulk email dispatch."""

__version__ = "0.1.0"
