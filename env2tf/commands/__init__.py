"""Click commands registered on the env2tf CLI group."""
