"""Web and command line front ends for the replay board viewer."""
