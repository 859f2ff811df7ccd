"""Shared type definitions for burrow."""

from typing import Literal

# Mode of operation
type BurrowMode = Literal["generate", "watch", "check"]

# Import reference of a route component (e.g. "@/routes/about", "./routes/about")
type ImportRef = str

# URL path fragment contributed by a route node (e.g. "about", ":id", "/")
type RoutePath = str

# Filesystem change kinds that affect the route tree
type ChangeKind = Literal["added", "deleted"]

# What a route node does in the tree
type NodeKind = Literal["leaf", "layout", "group"]

# What asked for a rebuild: the cold start or a change
type TriggerKind = Literal["startup", "added", "deleted"]
