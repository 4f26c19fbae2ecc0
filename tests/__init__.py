# Test package for mastermind_solver
