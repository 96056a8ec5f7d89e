"""
Demo course catalog and learning strategies.
"""

SAMPLE_COURSES = [
    {
        "title": "Critical Thinking Masterclass",
        "description": "Develop analytical thinking skills through systematic problem-solving methods and logical reasoning frameworks.",
        "url": "https://example.com/critical-thinking",
        "provider": "ThinkWell Academy",
        "tags": ["critical thinking", "logic", "analysis"],
        "suitable_personas": ["The Thinker", "The Synthesizer"],
        "difficulty": "Intermediate",
        "duration": "8 weeks",
    },
    {
        "title": "Effective Communication Strategies",
        "description": "Build skills in articulating ideas, facilitating discussions, and navigating diverse communication contexts.",
        "url": "https://example.com/communication",
        "provider": "ThinkWell Academy",
        "tags": ["communication", "facilitation", "networking"],
        "suitable_personas": ["The Connector"],
        "difficulty": "Beginner",
        "duration": "6 weeks",
    },
    {
        "title": "Collaborative Innovation Workshop",
        "description": "Learn to leverage group dynamics and collaborative techniques to generate innovative solutions to complex problems.",
        "url": "https://coursera.org/collaborative-innovation",
        "provider": "Coursera",
        "tags": ["collaboration", "innovation", "teamwork"],
        "suitable_personas": ["The Connector", "The Creator"],
        "difficulty": "Beginner",
        "duration": "4 weeks",
    },
    {
        "title": "Design Thinking Process",
        "description": "Master the design thinking methodology through hands-on exercises and real-world applications.",
        "url": "https://coursera.org/design-thinking",
        "provider": "Coursera",
        "tags": ["design thinking", "creativity", "problem-solving"],
        "suitable_personas": ["The Creator", "The Explorer"],
        "difficulty": "Intermediate",
        "duration": "6 weeks",
    },
    {
        "title": "Systems Thinking Fundamentals",
        "description": "Understand complex systems and learn methodologies for analyzing and improving them in business contexts.",
        "url": "https://edx.org/systems-thinking",
        "provider": "edX",
        "tags": ["systems thinking", "analysis", "business"],
        "suitable_personas": ["The Synthesizer", "The Thinker"],
        "difficulty": "Advanced",
        "duration": "5 weeks",
    },
    {
        "title": "Data Visualization Masterclass",
        "description": "Learn to create compelling visual representations of data that drive understanding and decision-making.",
        "url": "https://edx.org/data-visualization",
        "provider": "edX",
        "tags": ["data", "visualization", "analytics"],
        "suitable_personas": ["The Synthesizer"],
        "difficulty": "Intermediate",
        "duration": "7 weeks",
    },
    {
        "title": "Agile Project Management",
        "description": "Master the principles and practices of Agile methodology for more efficient project delivery.",
        "url": "https://linkedin-learning.com/agile-project-management",
        "provider": "LinkedIn Learning",
        "tags": ["agile", "project management", "scrum"],
        "suitable_personas": ["The Creator", "The Thinker"],
        "difficulty": "Intermediate",
        "duration": "3 weeks",
    },
    {
        "title": "Emotional Intelligence at Work",
        "description": "Develop your emotional intelligence to improve workplace relationships and leadership effectiveness.",
        "url": "https://linkedin-learning.com/emotional-intelligence",
        "provider": "LinkedIn Learning",
        "tags": ["emotional intelligence", "leadership", "soft skills"],
        "suitable_personas": ["The Connector"],
        "difficulty": "Beginner",
        "duration": "2 weeks",
    },
    {
        "title": "Emerging Technology Survey",
        "description": "Tour the technologies reshaping industries and evaluate where each could create value for your team.",
        "url": "https://coursera.org/emerging-technology",
        "provider": "Coursera",
        "tags": ["innovation", "technology", "research"],
        "suitable_personas": ["The Explorer"],
        "difficulty": "Beginner",
        "duration": "4 weeks",
    },
]

SAMPLE_STRATEGIES = [
    {
        "title": "Mind Mapping",
        "description": "A visual technique for organizing information and seeing connections between concepts.",
        "content": "1. Start with a central idea or topic in the middle of a blank page\n2. Draw branches from the center with key concepts related to the main topic\n3. Add smaller branches with related details\n4. Use colors, images, and symbols to enhance memory\n5. Connect related ideas with lines or arrows\n6. Review and revise your mind map as your understanding evolves",
        "suitable_personas": ["The Synthesizer"],
        "type": "Organization",
    },
    {
        "title": "The Feynman Technique",
        "description": "A method for deepening understanding by explaining concepts in simple terms.",
        "content": "1. Choose a concept or topic you want to learn\n2. Explain it in simple language as if teaching a child\n3. Identify gaps in your explanation or understanding\n4. Review your source material to fill those gaps\n5. Simplify your explanation further, using analogies and plain language\n6. Repeat until you can explain the concept clearly and completely",
        "suitable_personas": ["The Thinker", "The Connector"],
        "type": "Comprehension",
    },
    {
        "title": "Spaced Repetition",
        "description": "A technique for reviewing information at optimal intervals to improve long-term retention.",
        "content": "1. Learn the initial material thoroughly\n2. Review after 1 day\n3. Review again after 3 days\n4. Then after 7 days\n5. Then after 14 days\n6. Then after 30 days\n7. Use flashcards or spaced repetition software to automate this process\n8. Focus more time on difficult items and less on well-known items",
        "suitable_personas": ["The Thinker"],
        "type": "Retention",
    },
    {
        "title": "Project-Based Learning",
        "description": "Learning through the process of creating something tangible that solves a problem or meets a need.",
        "content": "1. Identify a real-world problem or need that interests you\n2. Research and gather information about the problem domain\n3. Design a project that addresses the problem\n4. Break the project into manageable steps\n5. Learn the necessary skills as you implement each step\n6. Reflect on challenges and solutions throughout the process\n7. Share your final project and gather feedback\n8. Document what you learned for future reference",
        "suitable_personas": ["The Creator"],
        "type": "Application",
    },
    {
        "title": "Collaborative Learning Circles",
        "description": "A method for learning through regular discussion and knowledge sharing with peers.",
        "content": "1. Form a group of 4-7 people with similar learning interests\n2. Set regular meeting times (weekly or bi-weekly)\n3. Establish clear goals and expectations for the group\n4. Rotate responsibility for facilitating discussions\n5. Share resources and insights between meetings\n6. Use structured formats like book discussions or topic presentations\n7. Provide constructive feedback to each other\n8. Document key insights from each meeting",
        "suitable_personas": ["The Connector"],
        "type": "Social Learning",
    },
    {
        "title": "Comparative Analysis",
        "description": "A technique for deepening understanding by systematically comparing related concepts or approaches.",
        "content": "1. Identify two or more related concepts, theories, or approaches\n2. Create a structured framework for comparison (table, matrix, etc.)\n3. Identify key dimensions or criteria for comparison\n4. Analyze similarities and differences across each dimension\n5. Consider contexts where each approach is most effective\n6. Synthesize insights about underlying principles\n7. Apply this comparative understanding to new situations",
        "suitable_personas": ["The Synthesizer", "The Thinker"],
        "type": "Analysis",
    },
    {
        "title": "Exploratory Learning Journeys",
        "description": "A method for expanding knowledge through structured but open-ended exploration of related topics.",
        "content": "1. Start with a central topic of interest\n2. Identify 3-5 related subtopics or questions\n3. Set a time limit for initial exploration (e.g., 2 hours per subtopic)\n4. Gather diverse resources on each subtopic\n5. Take notes focusing on surprising discoveries and connections\n6. Create a visual map of how the topics interconnect\n7. Identify the most promising areas for deeper exploration\n8. Share your discoveries with others to gain new perspectives",
        "suitable_personas": ["The Explorer"],
        "type": "Discovery",
    },
    {
        "title": "Prototyping and Iteration",
        "description": "A hands-on approach to learning through creating quick versions, gathering feedback, and refining.",
        "content": "1. Start with a clear goal or problem to solve\n2. Create a simple, quick version (prototype) of your solution\n3. Test the prototype with real users or situations\n4. Gather specific feedback about what works and what doesn't\n5. Identify the most important improvements to make\n6. Create an improved version based on feedback\n7. Repeat the testing and iteration process\n8. Document lessons learned throughout the process",
        "suitable_personas": ["The Creator", "The Explorer"],
        "type": "Application",
    },
]

DEPARTMENTS = [
    "Marketing",
    "Engineering",
    "Sales",
    "HR",
    "Finance",
    "Product",
    "Leadership",
    "Operations",
]
