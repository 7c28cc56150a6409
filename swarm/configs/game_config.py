"""
Game configuration
Tunables for the engine, the headless environment and the Arcade window
"""

# Engine parameters (SimulationEngine keyword arguments)
GAME_CONFIG = {
    "player_radius": 69.0,
    "player_speed": 750.0,
    "player_color": "#f43841",
    "max_health": 100.0,
    "bullet_radius": 42.0,
    "bullet_speed": 1500.0,
    "bullet_lifetime": 5.0,
    "enemy_radius": 69.0,
    "enemy_speed": 750.0 / 3,
    "enemy_color": "#9e95c7",
    "enemy_damage": 100.0 / 5,
    "kill_heal": 100.0 / 10,
    "kill_score": 100,
    "spawn_interval": 1.0,
    "spawn_interval_step": 0.01,
    "min_spawn_interval": 0.01,
    "spawn_distance": 1500.0,
    "particles_count": 50,
    "particle_radius": 10.0,
    "particle_magnitude": 1500.0,
    "particle_lifetime": 1.0,
    "tutorial_fade_speed": 1.7,
    "death_slowdown": 50.0,
}

# Headless environment parameters (SwarmEnv keyword arguments)
ENV_CONFIG = {
    "width": 1600,
    "height": 900,
    "dt": 1 / 30,
    "max_steps": 1800,  # 60 seconds at 30 FPS
    "k_enemies": 5,
    "death_penalty": 5.0,
}

# Arcade window parameters (ShooterWindow keyword arguments)
WINDOW_CONFIG = {
    "width": 1600,
    "height": 900,
    "title": "Swarm Shooter",
    "background_color": (24, 24, 24),
    "message_color": "#ffffff",
    "font_size": 30,
}

# Where the interactive game keeps its best score
BEST_SCORE_FILE = "~/.swarm_shooter/best_score.json"
