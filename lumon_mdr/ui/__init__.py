"""Screen drawing onto a character canvas: login, loading, work and prize screens."""