"""Shared test doubles: sample resources, voters, decision manager."""
