"""Command line tool for serving and inspecting kubeconfig directories."""
