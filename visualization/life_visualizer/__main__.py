from life_visualizer.main import main

if __name__ == "__main__":
    main()
