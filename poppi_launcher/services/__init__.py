"""Side-effecting collaborators: external tools, IPC and process spawning."""
