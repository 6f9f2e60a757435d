"""
Built-in catalog of Unity specialist profiles.

Static reference data used when no registry file is configured. Weights are
product choices: 3 for terms that name the domain outright, 2 for strong
hints, 1 for terms that are shared with neighbouring domains.
"""
from typing import Any, Dict, List

GENERALIST_ID = "generalist"


def list_specialists() -> List[Dict[str, Any]]:
    """Return the built-in specialist records, in tie-break order."""
    return [
        {
            "id": GENERALIST_ID,
            "name": "Unity Generalist",
            "description": "Broad Unity development help when no specialist clearly fits.",
            "keywords": {},
            "priority": 1000,
        },
        {
            "id": "gameplay",
            "name": "Gameplay Programmer",
            "description": "Player controllers, game mechanics, input and game state.",
            "keywords": {
                "gameplay": 3, "mechanic": 2, "mechanics": 2, "player controller": 3,
                "character controller": 3, "input system": 2, "inventory": 2,
                "combat": 2, "weapon": 1, "spawn": 1, "health system": 2,
                "game loop": 2, "jump": 1, "movement": 1, "quest system": 2,
            },
            "priority": 10,
        },
        {
            "id": "graphics",
            "name": "Graphics and Shader Engineer",
            "description": "Shaders, materials, lighting, VFX and rendering features.",
            "keywords": {
                "shader": 3, "shaders": 3, "shader graph": 3, "hologram": 3,
                "rendering": 2, "material": 1, "materials": 1, "lighting": 2,
                "post processing": 2, "vfx": 2, "vfx graph": 3, "particle": 1,
                "particles": 1, "urp": 2, "hdrp": 2, "effect": 1, "outline": 1,
            },
            "priority": 20,
        },
        {
            "id": "performance",
            "name": "Performance Optimizer",
            "description": "Profiling, draw call reduction, memory and frame-time budgets.",
            "keywords": {
                "performance": 3, "optimize": 2, "optimization": 2, "profiler": 3,
                "profiling": 3, "draw calls": 3, "batching": 2, "fps": 2,
                "frame rate": 2, "garbage collection": 2, "gc": 2, "memory": 1,
                "lag": 1, "stutter": 2, "lod": 1, "occlusion culling": 2,
            },
            "priority": 30,
        },
        {
            "id": "networking",
            "name": "Multiplayer Networking Engineer",
            "description": "Netcode, replication, lobbies and authoritative servers.",
            "keywords": {
                "multiplayer": 3, "netcode": 3, "networking": 2, "replication": 2,
                "lobby": 2, "matchmaking": 2, "server": 1, "client": 1,
                "rpc": 2, "latency": 2, "lag compensation": 3, "mirror": 2,
                "photon": 2, "battle royale": 1,
            },
            "prerequisites": ["multiplayer"],
            "priority": 40,
        },
        {
            "id": "ui",
            "name": "UI Engineer",
            "description": "uGUI, UI Toolkit, HUDs, menus and responsive layouts.",
            "keywords": {
                "ui": 3, "ui toolkit": 3, "ugui": 3, "hud": 3, "menu": 2,
                "menus": 2, "canvas": 2, "button": 1, "layout": 1,
                "inventory screen": 2, "health bar": 2, "tooltip": 2,
            },
            "priority": 50,
        },
        {
            "id": "animation",
            "name": "Animation Specialist",
            "description": "Animator controllers, rigs, blend trees, IK and Timeline.",
            "keywords": {
                "animation": 3, "animator": 3, "blend tree": 3, "rig": 2,
                "rigging": 2, "ik": 2, "inverse kinematics": 3, "timeline": 2,
                "cutscene": 2, "root motion": 3, "mocap": 2,
            },
            "priority": 60,
        },
        {
            "id": "physics",
            "name": "Physics Specialist",
            "description": "Rigidbodies, colliders, raycasts, joints and vehicle physics.",
            "keywords": {
                "physics": 3, "rigidbody": 3, "collider": 2, "collision": 2,
                "raycast": 2, "joint": 1, "ragdoll": 3, "vehicle": 1,
                "gravity": 1, "trigger": 1,
            },
            "priority": 70,
        },
        {
            "id": "game-ai",
            "name": "Game AI Engineer",
            "description": "NavMesh pathfinding, behaviour trees, state machines for NPCs.",
            "keywords": {
                "ai": 2, "npc": 3, "enemy ai": 3, "navmesh": 3, "pathfinding": 3,
                "behaviour tree": 3, "behavior tree": 3, "state machine": 1,
                "steering": 2, "perception": 1,
            },
            "priority": 80,
        },
        {
            "id": "audio",
            "name": "Audio Engineer",
            "description": "AudioSources, mixers, spatial sound and adaptive music.",
            "keywords": {
                "audio": 3, "sound": 2, "music": 2, "mixer": 2, "sfx": 2,
                "spatial audio": 3, "fmod": 3, "wwise": 3, "footsteps": 1,
            },
            "priority": 90,
        },
        {
            "id": "architecture",
            "name": "Architecture Specialist",
            "description": "Project structure, ScriptableObjects, DI, Addressables and DOTS.",
            "keywords": {
                "architecture": 3, "scriptableobject": 2, "scriptableobjects": 2,
                "dependency injection": 3, "addressables": 2, "ecs": 2, "dots": 2,
                "refactor": 2, "design pattern": 2, "save system": 2,
                "event system": 1, "assembly definition": 2,
            },
            "priority": 100,
        },
        {
            "id": "editor-tools",
            "name": "Editor Tools Developer",
            "description": "Custom inspectors, editor windows and pipeline automation.",
            "keywords": {
                "editor window": 3, "custom inspector": 3, "property drawer": 3,
                "editor tool": 3, "editor tools": 3, "gizmo": 2, "menu item": 2,
                "asset postprocessor": 3, "build pipeline": 2,
            },
            "priority": 110,
        },
        {
            "id": "mobile",
            "name": "Mobile Platform Specialist",
            "description": "Android and iOS builds, touch input, battery and thermal limits.",
            "keywords": {
                "mobile": 3, "android": 3, "ios": 3, "touch": 2, "battery": 2,
                "thermal": 2, "app store": 2, "play store": 2,
            },
            "prerequisites": ["mobile"],
            "priority": 120,
        },
        {
            "id": "xr",
            "name": "XR Specialist",
            "description": "VR, AR and mixed reality with the XR Interaction Toolkit.",
            "keywords": {
                "vr": 3, "ar": 3, "xr": 3, "xr interaction toolkit": 3,
                "hand tracking": 3, "headset": 2, "passthrough": 2, "quest": 2,
            },
            "prerequisites": ["xr"],
            "priority": 130,
        },
    ]
